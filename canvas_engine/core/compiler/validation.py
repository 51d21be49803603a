"""Structural validation of compiled (or externally supplied) plans."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from canvas_engine.core.intent_schema.plan import (
    CanvasInstructionPlan,
    CreateNodeStep,
    step_reference_errors,
)

logger = logging.getLogger(__name__)

FIRST_LAST_FRAME = "FIRST_LAST_FRAME"


class PlanValidationResult(BaseModel):
    """Result of plan validation."""
    valid: bool
    plan: Optional[CanvasInstructionPlan] = None
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def _frame_errors(index: int, step: CreateNodeStep) -> list[str]:
    config = step.config_template
    if step.node_type != "video-generator" or config.get("connectionType") != FIRST_LAST_FRAME:
        return []
    missing = [k for k in ("firstFrameId", "lastFrameId") if not config.get(k)]
    if not missing:
        return []
    return [f"steps[{index}] first/last-frame video is missing {', '.join(missing)}"]


def validate_plan(plan: CanvasInstructionPlan | dict[str, Any]) -> PlanValidationResult:
    """
    Check a plan the executor is about to apply.

    Errors: duplicate step ids, references to steps that do not appear
    earlier, and first/last-frame video steps without both frame ids.
    Warnings: the plan has no steps.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if isinstance(plan, dict):
        try:
            plan = CanvasInstructionPlan.model_validate(plan)
        except ValidationError as e:
            for err in e.errors():
                loc = ' → '.join(str(x) for x in err.get('loc', []))
                msg = err.get('msg', 'Unknown error')
                errors.append(f"{loc}: {msg}" if loc else msg)
            return PlanValidationResult(valid=False, plan=None, errors=errors, warnings=warnings)

    errors.extend(step_reference_errors(plan.steps))
    for index, step in enumerate(plan.steps):
        if isinstance(step, CreateNodeStep):
            errors.extend(_frame_errors(index, step))
            if step.batch_configs is not None and len(step.batch_configs) != step.count:
                warnings.append(
                    f"steps[{index}] has {len(step.batch_configs)} batch config(s) for {step.count} node(s)"
                )

    if plan.is_empty():
        warnings.append("Plan is empty - no canvas changes")

    if errors:
        logger.warning(f"⚠️ Plan {plan.id} failed validation: {errors}")
    return PlanValidationResult(valid=not errors, plan=plan, errors=errors, warnings=warnings)
