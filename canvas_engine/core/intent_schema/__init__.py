"""
Intent schema package.

The immutable interface every other component is built against: what an
upstream caller may produce and what the engine returns.
"""
from __future__ import annotations

from canvas_engine.core.intent_schema.enums import (
    ActionIntent,
    CapabilityType,
    ContentKind,
    CONVERSATIONAL_GOALS,
    GoalType,
)
from canvas_engine.core.intent_schema.goals import (
    GRAPH_PAYLOAD_KEYS,
    AbstractIntent,
    Preferences,
    SemanticGoal,
    parse_abstract_intent,
    parse_semantic_goal,
)
from canvas_engine.core.intent_schema.plan import (
    CanvasInstructionPlan,
    CanvasInstructionStep,
    ConnectSequentiallyStep,
    CreateNodeStep,
    DeleteNodeStep,
    GroupNodesStep,
    PlanMetadata,
    step_reference_errors,
)
from canvas_engine.core.intent_schema.workflow import Position, WorkflowConnection, WorkflowNode
from canvas_engine.core.intent_schema.actions import ResolvedAction
from canvas_engine.core.intent_schema.context import (
    CanvasImageRef,
    CanvasNodeRef,
    CanvasSelection,
    CanvasStateSnapshot,
    ResolverContext,
)

__all__ = [
    # Enums
    "ActionIntent",
    "CapabilityType",
    "ContentKind",
    "CONVERSATIONAL_GOALS",
    "GoalType",
    # Inbound
    "GRAPH_PAYLOAD_KEYS",
    "AbstractIntent",
    "Preferences",
    "SemanticGoal",
    "parse_abstract_intent",
    "parse_semantic_goal",
    "ResolverContext",
    "CanvasSelection",
    "CanvasStateSnapshot",
    "CanvasNodeRef",
    "CanvasImageRef",
    # Outbound
    "ResolvedAction",
    "CanvasInstructionPlan",
    "CanvasInstructionStep",
    "CreateNodeStep",
    "ConnectSequentiallyStep",
    "GroupNodesStep",
    "DeleteNodeStep",
    "PlanMetadata",
    "step_reference_errors",
    "Position",
    "WorkflowNode",
    "WorkflowConnection",
]
