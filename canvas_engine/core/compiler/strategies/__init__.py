"""
Compilation strategies, one per GoalType.

Each strategy appends steps to ``ctx.steps`` and returns the plan summary.
Strategies never read another strategy's output.
"""
from __future__ import annotations

from typing import Callable

from canvas_engine.core.compiler.context import CompileContext
from canvas_engine.core.compiler.strategies.animate import compile_image_animate
from canvas_engine.core.compiler.strategies.conversational import compile_conversational, compile_unknown
from canvas_engine.core.compiler.strategies.delete import compile_delete_content
from canvas_engine.core.compiler.strategies.image import compile_image_generation
from canvas_engine.core.compiler.strategies.music import compile_music_video
from canvas_engine.core.compiler.strategies.plugin import compile_plugin_action
from canvas_engine.core.compiler.strategies.story import compile_story_video
from canvas_engine.core.compiler.strategies.video_request import compile_video_request
from canvas_engine.core.intent_schema.enums import GoalType

Strategy = Callable[[CompileContext], str]

STRATEGIES: dict[GoalType, Strategy] = {
    GoalType.STORY_VIDEO: compile_story_video,
    GoalType.IMAGE_GENERATION: compile_image_generation,
    GoalType.IMAGE_ANIMATE: compile_image_animate,
    GoalType.MUSIC_VIDEO: compile_music_video,
    GoalType.VIDEO_REQUEST: compile_video_request,
    GoalType.DELETE_CONTENT: compile_delete_content,
    GoalType.PLUGIN_ACTION: compile_plugin_action,
    GoalType.EXPLAIN_CANVAS: compile_conversational,
    GoalType.CLARIFY: compile_conversational,
    GoalType.UNKNOWN: compile_unknown,
}

_missing = set(GoalType) - set(STRATEGIES)
if _missing:
    raise RuntimeError(f"No compilation strategy for goal type(s): {sorted(g.value for g in _missing)}")

__all__ = ["STRATEGIES", "Strategy"]
