"""Frozen dataclasses describing what each generation model can do."""

from __future__ import annotations

from dataclasses import dataclass, field

from canvas_engine.core.intent_schema.enums import CapabilityType


@dataclass(frozen=True)
class ModelSupports:
    """Generation modes a model accepts."""
    text_to_content: bool
    content_to_content: bool
    multimodal: bool = False


@dataclass(frozen=True)
class TemporalLimits:
    """Per-call duration envelope of a video model.

    Exactly one of two shapes applies:

    - ``durations`` set: the back-end accepts only these discrete values.
    - ``durations`` empty: any value in ``[min_output_seconds, max_output_seconds]``.
    """
    max_output_seconds: int
    stitchable: bool
    max_input_seconds: int | None = None
    durations: tuple[int, ...] = ()
    min_output_seconds: int = 1

    @property
    def is_discrete(self) -> bool:
        return bool(self.durations)

    @property
    def lower_bound(self) -> int:
        return min(self.durations) if self.durations else self.min_output_seconds

    @property
    def upper_bound(self) -> int:
        return max(self.durations) if self.durations else self.max_output_seconds


@dataclass(frozen=True)
class ModelConstraint:
    """One row of the capability registry."""
    id: str
    name: str
    input_type: str
    output_type: str
    supports: ModelSupports
    resolutions: tuple[str, ...] = ()
    aspect_ratios: tuple[str, ...] = ()
    max_batch: int = 1
    is_default: bool = False
    is_high_res: bool = False
    is_turbo: bool = False
    temporal: TemporalLimits | None = None
    strengths: tuple[str, ...] = ()
    parameters: tuple[tuple[str, str], ...] = ()
    quality_tier: str | None = None

    def supports_resolution(self, resolution: str | None) -> bool:
        return resolution is not None and resolution in self.resolutions

    def supports_aspect_ratio(self, aspect_ratio: str | None) -> bool:
        return aspect_ratio is not None and aspect_ratio in self.aspect_ratios


@dataclass(frozen=True)
class CapabilityDefinition:
    """An ordered group of models under one capability family."""
    id: CapabilityType
    models: tuple[ModelConstraint, ...] = field(default_factory=tuple)

    def get_model(self, model_id: str) -> ModelConstraint | None:
        """Return the model with this exact id, or ``None``."""
        for model in self.models:
            if model.id == model_id:
                return model
        return None

    def default_model(self) -> ModelConstraint | None:
        """Return the family default, falling back to registry order."""
        for model in self.models:
            if model.is_default:
                return model
        return self.models[0] if self.models else None

    def find_model(self, query: str | None) -> ModelConstraint | None:
        """Match by exact id, then case-insensitive substring of the display name."""
        if not query:
            return None
        exact = self.get_model(query)
        if exact is not None:
            return exact
        needle = query.strip().lower()
        if not needle:
            return None
        for model in self.models:
            if needle in model.name.lower():
                return model
        return None

    def model_ids(self) -> list[str]:
        return [m.id for m in self.models]
