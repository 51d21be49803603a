"""
WildMind Canvas Engine.

Maps abstract generation goals onto concrete, validated canvas plans:

1. CAPABILITY REGISTRY (core/capabilities)
   - Read-only catalog of generation models per capability family

2. CAPABILITY RESOLVER (core/resolver)
   - AbstractIntent → ResolvedAction (single action, answer, error, or plan)

3. INSTRUCTION COMPILER (core/compiler)
   - SemanticGoal → CanvasInstructionPlan (ordered, dependency-checked steps)

4. VIDEO PLANNER (core/planner)
   - Splits long videos into model-sized segments

Main entrypoints: resolve_intent(), compile_goal_to_plan(), plan_video_execution()
"""
from __future__ import annotations

from canvas_engine.core.capabilities import CapabilityRegistry, default_registry
from canvas_engine.core.compiler import InstructionCompiler, compile_goal_to_plan
from canvas_engine.core.planner import plan_video_execution
from canvas_engine.core.resolver import CapabilityResolver, resolve_intent

__all__ = [
    "CapabilityRegistry",
    "default_registry",
    "InstructionCompiler",
    "compile_goal_to_plan",
    "plan_video_execution",
    "CapabilityResolver",
    "resolve_intent",
]
