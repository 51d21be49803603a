"""Pydantic models for what an upstream producer may send.

Both models are a validation boundary: graph-shaped keys (``workflow``,
``nodes``, ``connections``, ``steps``) are dropped before validation, because
only the compiler is allowed to produce plan structure.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ConfigDict, Field, ValidationError, field_validator, model_validator

from canvas_engine.errors import GoalValidationError
from canvas_engine.core.intent_schema.enums import CapabilityType, ContentKind, GoalType
from canvas_engine.models.base import FrozenCamelModel, to_camel

logger = logging.getLogger(__name__)

GRAPH_PAYLOAD_KEYS: frozenset[str] = frozenset({"workflow", "nodes", "connections", "steps"})

_CONTENT_ALIASES: dict[str, ContentKind] = {
    "music": ContentKind.AUDIO,
    "song": ContentKind.AUDIO,
    "images": ContentKind.IMAGE,
    "videos": ContentKind.VIDEO,
}


def _discard_graph_payload(data: Any, model_name: str) -> Any:
    if not isinstance(data, dict):
        return data
    dropped = sorted(k for k in data if k in GRAPH_PAYLOAD_KEYS)
    if not dropped:
        return data
    logger.warning(f"⚠️ {model_name}: discarding caller-supplied graph payload {dropped}")
    return {k: v for k, v in data.items() if k not in GRAPH_PAYLOAD_KEYS}


def _coerce_needs(value: Any) -> Any:
    if not isinstance(value, (list, tuple, set)):
        return value
    needs: list[ContentKind] = []
    for raw in value:
        key = str(raw).strip().lower()
        kind = _CONTENT_ALIASES.get(key)
        if kind is None:
            try:
                kind = ContentKind(key)
            except ValueError:
                logger.debug(f"Ignoring unknown content kind '{raw}'")
                continue
        if kind not in needs:
            needs.append(kind)
    return needs


def _format_errors(exc: ValidationError) -> list[str]:
    errors: list[str] = []
    for err in exc.errors():
        loc = ' → '.join(str(x) for x in err.get('loc', []))
        errors.append(f"{loc}: {err.get('msg', 'Unknown error')}" if loc else err.get('msg', 'Unknown error'))
    return errors


class Preferences(FrozenCamelModel):
    """Caller preferences; unrecognised keys are kept as plugin parameters."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow")

    preferred_model: str | None = None
    aspect_ratio: str | None = None
    duration: float | None = None
    resolution: str | None = None
    style: str | None = None
    count: int | None = None
    strategy: str | None = None
    quality: str | None = None

    def extra_params(self) -> dict[str, Any]:
        """Keys the caller sent that are not named preferences."""
        return dict(self.model_extra or {})


class AbstractIntent(FrozenCamelModel):
    """The minimal intent an upstream model is allowed to emit."""

    capability: CapabilityType = CapabilityType.UNKNOWN
    goal: str = Field(default="", description="Verb such as 'generate', 'upscale', 'answer'")
    goal_type: GoalType | None = None
    prompt: str | None = None
    references: list[str] = Field(default_factory=list, description="Ids of canvas elements the intent targets")
    needs: list[ContentKind] = Field(default_factory=list)
    preferences: Preferences = Field(default_factory=Preferences)
    explanation: str = ""

    @model_validator(mode="before")
    @classmethod
    def _strip_graph(cls, data: Any) -> Any:
        return _discard_graph_payload(data, "AbstractIntent")

    @field_validator("capability", mode="before")
    @classmethod
    def _coerce_capability(cls, v: Any) -> Any:
        if v is None:
            return CapabilityType.UNKNOWN
        if isinstance(v, CapabilityType):
            return v
        try:
            return CapabilityType(str(v).strip().upper())
        except ValueError:
            logger.info(f"Unknown capability '{v}', treating as UNKNOWN")
            return CapabilityType.UNKNOWN

    @field_validator("goal_type", mode="before")
    @classmethod
    def _coerce_goal_type(cls, v: Any) -> Any:
        if v is None or isinstance(v, GoalType):
            return v
        try:
            return GoalType(str(v).strip().upper())
        except ValueError:
            return GoalType.UNKNOWN

    @field_validator("needs", mode="before")
    @classmethod
    def _coerce_needs(cls, v: Any) -> Any:
        return _coerce_needs(v)

    @field_validator("references", mode="before")
    @classmethod
    def _drop_empty_references(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [r for r in v if r]
        return v

    def to_semantic_goal(self, goal_type: GoalType, **overrides: Any) -> SemanticGoal:
        """Lift this intent into a SemanticGoal of the given type."""
        prefs = self.preferences
        extras = prefs.extra_params()
        fields: dict[str, Any] = {
            "goal_type": goal_type,
            "needs": list(self.needs),
            "topic": self.prompt or self.goal or None,
            "plugin_type": extras.get("pluginType") or extras.get("plugin_type"),
            "duration_seconds": prefs.duration,
            "style": prefs.style,
            "aspect_ratio": prefs.aspect_ratio,
            "resolution": prefs.resolution,
            "count": prefs.count,
            "model": prefs.preferred_model,
            "strategy": prefs.strategy,
            "references": list(self.references),
            "explanation": self.explanation,
            "raw_input": self.prompt,
        }
        fields.update(overrides)
        return SemanticGoal(**fields)


class SemanticGoal(FrozenCamelModel):
    """A normalised goal description, the only input the compiler accepts."""

    goal_type: GoalType = GoalType.UNKNOWN
    needs: list[ContentKind] = Field(default_factory=list)
    topic: str | None = None
    plugin_type: str | None = Field(default=None, description="Plugin name, e.g. 'upscale', 'remove-bg'")
    duration_seconds: float | None = None
    style: str | None = None
    aspect_ratio: str | None = None
    resolution: str | None = None
    count: int | None = None
    model: str | None = None
    strategy: str | None = None
    references: list[str] = Field(default_factory=list)
    explanation: str = ""
    raw_input: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _strip_graph(cls, data: Any) -> Any:
        return _discard_graph_payload(data, "SemanticGoal")

    @field_validator("goal_type", mode="before")
    @classmethod
    def _coerce_goal_type(cls, v: Any) -> Any:
        if v is None:
            return GoalType.UNKNOWN
        if isinstance(v, GoalType):
            return v
        try:
            return GoalType(str(v).strip().upper())
        except ValueError:
            logger.info(f"Unknown goal type '{v}', treating as UNKNOWN")
            return GoalType.UNKNOWN

    @field_validator("needs", mode="before")
    @classmethod
    def _coerce_needs(cls, v: Any) -> Any:
        return _coerce_needs(v)

    @field_validator("duration_seconds")
    @classmethod
    def _positive_duration(cls, v: float | None) -> float | None:
        # A non-positive duration carries no information; strategies apply their default.
        return v if v is not None and v > 0 else None

    @field_validator("count")
    @classmethod
    def _positive_count(cls, v: int | None) -> int | None:
        return v if v is not None and v > 0 else None

    @field_validator("references", mode="before")
    @classmethod
    def _drop_empty_references(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [r for r in v if r]
        return v

    @property
    def text(self) -> str:
        """Topic and raw input joined, for keyword scanning."""
        return " ".join(p for p in (self.topic, self.raw_input) if p)


def parse_semantic_goal(raw: dict[str, Any], require_explanation: bool = False) -> SemanticGoal:
    """Validate a raw dict (e.g. LLM output) as a SemanticGoal.

    ``require_explanation`` enforces the LLM-facing contract that every goal
    carries a human-readable rationale.
    """
    try:
        goal = SemanticGoal.model_validate(raw)
    except ValidationError as e:
        raise GoalValidationError(_format_errors(e)) from e
    if require_explanation and not goal.explanation.strip():
        raise GoalValidationError(["explanation: must be a non-empty string"])
    return goal


def parse_abstract_intent(raw: dict[str, Any]) -> AbstractIntent:
    """Validate a raw dict as an AbstractIntent."""
    try:
        return AbstractIntent.model_validate(raw)
    except ValidationError as e:
        raise GoalValidationError(_format_errors(e)) from e
