"""
Instruction Compiler — SemanticGoal → CanvasInstructionPlan.

Dispatches on ``goal.goal_type`` to exactly one strategy.  The plan's step
order is its dependency order; the plan model rejects anything else.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

from canvas_engine.core.capabilities import CapabilityRegistry, default_registry
from canvas_engine.core.compiler.context import CompileContext
from canvas_engine.core.compiler.strategies import STRATEGIES
from canvas_engine.core.intent_schema.enums import CONVERSATIONAL_GOALS
from canvas_engine.core.intent_schema.goals import SemanticGoal, parse_semantic_goal
from canvas_engine.core.intent_schema.plan import CanvasInstructionPlan, PlanMetadata

logger = logging.getLogger(__name__)


class InstructionCompiler:
    """
    Compiles semantic goals against one capability registry.

    Usage:
        compiler = InstructionCompiler(registry)
        plan = compiler.compile(goal)
    """

    def __init__(self, registry: CapabilityRegistry | None = None) -> None:
        self.registry = registry or default_registry()

    def compile(self, goal: SemanticGoal | dict[str, Any]) -> CanvasInstructionPlan:
        if not isinstance(goal, SemanticGoal):
            goal = parse_semantic_goal(goal)

        ctx = CompileContext(goal=goal, registry=self.registry)
        summary = STRATEGIES[goal.goal_type](ctx)

        plan = CanvasInstructionPlan(
            id=str(uuid.uuid4()),
            summary=summary,
            steps=ctx.steps,
            metadata=PlanMetadata(source_goal=goal, compiled_at=int(time.time() * 1000)),
            requires_confirmation=goal.goal_type not in CONVERSATIONAL_GOALS,
        )
        logger.info(f"✅ Compiled {goal.goal_type.value}: {len(plan.steps)} step(s) {plan.step_actions()}")
        return plan


def compile_goal_to_plan(
    goal: SemanticGoal | dict[str, Any],
    registry: CapabilityRegistry | None = None,
) -> CanvasInstructionPlan:
    """Compile one goal with a throwaway compiler."""
    return InstructionCompiler(registry).compile(goal)
