"""ResolvedAction — the single-step outcome of capability resolution."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from canvas_engine.core.intent_schema.enums import ActionIntent, CapabilityType
from canvas_engine.core.intent_schema.plan import CanvasInstructionPlan
from canvas_engine.models.base import FrozenCamelModel


class ResolvedAction(FrozenCamelModel):
    """Final, validated action for the executor.

    ``payload`` holds generation parameters, or the whole plan when
    ``intent`` is ``EXECUTE_PLAN``.  An ``ERROR`` action is a normal return
    value: its ``payload["error"]`` and ``explanation`` are user-facing.
    """

    intent: ActionIntent
    capability: CapabilityType
    model_id: str
    payload: CanvasInstructionPlan | dict[str, Any] = Field(default_factory=dict)
    requires_confirmation: bool = False
    explanation: str = ""

    @property
    def plan(self) -> CanvasInstructionPlan | None:
        return self.payload if isinstance(self.payload, CanvasInstructionPlan) else None

    @property
    def is_error(self) -> bool:
        return self.intent == ActionIntent.ERROR
