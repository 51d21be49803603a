"""Enumerations shared by every layer of the engine."""

from __future__ import annotations

from enum import Enum


class CapabilityType(str, Enum):
    """Capability families, plus the input-only aliases upstream may send.

    ``CONNECT`` and ``UNKNOWN`` are resolved as ``IMAGE``; ``WORKFLOW`` is the
    deprecated graph-shaped request that is re-inferred into a goal.
    """
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    TEXT = "TEXT"
    PLUGIN = "PLUGIN"
    MUSIC = "MUSIC"
    CONNECT = "CONNECT"
    UNKNOWN = "UNKNOWN"
    WORKFLOW = "WORKFLOW"


class GoalType(str, Enum):
    """Semantic goal kinds the Instruction Compiler has a strategy for."""
    STORY_VIDEO = "STORY_VIDEO"
    IMAGE_GENERATION = "IMAGE_GENERATION"
    IMAGE_ANIMATE = "IMAGE_ANIMATE"
    MUSIC_VIDEO = "MUSIC_VIDEO"
    VIDEO_REQUEST = "VIDEO_REQUEST"
    DELETE_CONTENT = "DELETE_CONTENT"
    PLUGIN_ACTION = "PLUGIN_ACTION"
    EXPLAIN_CANVAS = "EXPLAIN_CANVAS"
    CLARIFY = "CLARIFY"
    UNKNOWN = "UNKNOWN"


class ContentKind(str, Enum):
    """Kinds of content a goal may need."""
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    MOTION = "motion"
    PLUGIN = "plugin"


class ActionIntent(str, Enum):
    """Executor verbs carried by a ResolvedAction."""
    GENERATE_IMAGE = "GENERATE_IMAGE"
    GENERATE_VIDEO = "GENERATE_VIDEO"
    GENERATE_MUSIC = "GENERATE_MUSIC"
    CREATE_TEXT = "CREATE_TEXT"
    GENERATE_PLUGIN = "GENERATE_PLUGIN"
    ANSWER = "ANSWER"
    EXECUTE_PLAN = "EXECUTE_PLAN"
    ERROR = "ERROR"


# Goal types that never touch the canvas and never need confirmation.
CONVERSATIONAL_GOALS: frozenset[GoalType] = frozenset({GoalType.EXPLAIN_CANVAS, GoalType.CLARIFY})
