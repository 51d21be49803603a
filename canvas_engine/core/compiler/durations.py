"""Clamp requested durations and resolutions into a model's valid domain."""

from __future__ import annotations

import logging
import math

from canvas_engine.core.capabilities.models import ModelConstraint, TemporalLimits
from canvas_engine.errors import MissingTemporalEnvelopeError

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def nearest_valid_duration(temporal: TemporalLimits, seconds: float) -> int:
    """Snap ``seconds`` onto the envelope; discrete ties go to the longer value.

    For a ``(4, 6, 8)`` set this buckets ``< 5`` → 4, ``< 7`` → 6, else 8.
    """
    if temporal.is_discrete:
        return min(temporal.durations, key=lambda d: (abs(d - seconds), -d))
    clamped = min(max(seconds, temporal.lower_bound), temporal.upper_bound)
    return _round_half_up(clamped)


def clamp_duration(model: ModelConstraint, requested: float | None, default: float) -> int:
    """
    Resolve the per-call duration for ``model``.

    - Discrete set: a requested value in the set is kept; anything else
      (including ``None``, which becomes ``default``) snaps to the nearest
      valid value.
    - Continuous range: an in-range request is kept (rounded); otherwise the
      value is clamped into ``[min, max]`` then rounded.

    Raises:
        MissingTemporalEnvelopeError: ``model`` has no temporal limits
    """
    temporal = model.temporal
    if temporal is None:
        raise MissingTemporalEnvelopeError(model.id)

    if requested is not None:
        if temporal.is_discrete and requested in temporal.durations:
            return int(requested)
        if not temporal.is_discrete and temporal.lower_bound <= requested <= temporal.upper_bound:
            return _round_half_up(requested)

    value = requested if requested is not None else default
    resolved = nearest_valid_duration(temporal, value)
    if requested is not None and resolved != requested:
        logger.info(f"Duration {requested}s is not valid for {model.id}; using {resolved}s")
    return resolved


def normalize_resolution(model: ModelConstraint, requested: str | None) -> str | None:
    """
    Match ``requested`` against the model's resolutions.

    Bare numbers get a ``p`` suffix ("1080" → "1080p"); matching is
    case-insensitive and returns the model's own spelling.  Falls back to the
    model's first resolution.
    """
    if not model.resolutions:
        return requested
    if requested:
        wanted = requested.strip().lower()
        if wanted.isdigit():
            wanted += "p"
        for resolution in model.resolutions:
            if resolution.lower() == wanted:
                return resolution
        logger.info(f"Resolution '{requested}' not supported by {model.id}; using {model.resolutions[0]}")
    return model.resolutions[0]
