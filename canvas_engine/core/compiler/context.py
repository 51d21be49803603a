"""Per-call state handed to each compilation strategy."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any

from canvas_engine.core.capabilities import CapabilityRegistry, ModelConstraint
from canvas_engine.core.compiler.normalization import normalize_model_name
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.goals import SemanticGoal
from canvas_engine.core.intent_schema.plan import (
    ConnectSequentiallyStep,
    CreateNodeStep,
    DeleteNodeStep,
    GroupNodesStep,
)
from canvas_engine.errors import CapabilityConfigError

logger = logging.getLogger(__name__)

Step = CreateNodeStep | ConnectSequentiallyStep | GroupNodesStep | DeleteNodeStep


def new_step_id() -> str:
    return str(uuid.uuid4())


def format_seconds(seconds: float) -> str:
    return f"{int(seconds)}s" if float(seconds).is_integer() else f"{seconds:g}s"


@dataclass
class CompileContext:
    """Goal, registry and the step list a strategy appends to."""
    goal: SemanticGoal
    registry: CapabilityRegistry
    steps: list[Step] = field(default_factory=list)

    def add(self, step: Step) -> str:
        self.steps.append(step)
        return step.id

    def pick_model(self, family: CapabilityType, fallback_id: str | None = None) -> ModelConstraint:
        """Explicit ``goal.model`` if it names a model in ``family``, else ``fallback_id``, else the default."""
        if self.goal.model:
            model_id = normalize_model_name(self.goal.model, self.registry, family)
            if model_id:
                model = self.registry.get_model(family, model_id)
                if model is not None:
                    return model
            logger.info(f"Requested model '{self.goal.model}' is not a {family.value} model; using fallback")
        if fallback_id:
            model = self.registry.get_model(family, fallback_id)
            if model is not None:
                return model
        default = self.registry.default_model(family)
        if default is None:
            raise CapabilityConfigError(f"Family {family.value} has no models")
        return default

    def aspect_ratio(self, model: ModelConstraint, fallback: str = "16:9") -> str:
        """Requested ratio when the model supports it, else the model's first ratio."""
        requested = self.goal.aspect_ratio
        if requested and (model.supports_aspect_ratio(requested) or not model.aspect_ratios):
            return requested
        if requested:
            logger.info(f"Aspect ratio '{requested}' not supported by {model.id}")
        return model.aspect_ratios[0] if model.aspect_ratios else (requested or fallback)

    @property
    def topic(self) -> str:
        return (self.goal.topic or self.goal.raw_input or "").strip()


def model_fields(model: ModelConstraint) -> dict[str, Any]:
    """The ``configTemplate`` keys identifying a model to the executor."""
    return {"model": model.name, "modelId": model.id}
