"""Generation parameter resolution and plugin target lookup."""

from __future__ import annotations

import logging
from typing import Optional

from canvas_engine.core.capabilities import ModelConstraint
from canvas_engine.core.intent_schema.context import ResolverContext
from canvas_engine.core.intent_schema.goals import AbstractIntent

logger = logging.getLogger(__name__)

PREFERRED_RESOLUTION = "1024"


def resolve_aspect_ratio(model: ModelConstraint, requested: Optional[str]) -> Optional[str]:
    """Requested ratio if the model supports it, else the model's first ratio."""
    if model.supports_aspect_ratio(requested):
        return requested
    if requested and model.aspect_ratios:
        logger.info(f"Aspect ratio '{requested}' not supported by {model.id}, using {model.aspect_ratios[0]}")
    return model.aspect_ratios[0] if model.aspect_ratios else requested


def resolve_resolution(model: ModelConstraint, requested: Optional[str]) -> Optional[str]:
    """Requested resolution if supported, else ``"1024"`` if supported, else the first."""
    if model.supports_resolution(requested):
        return requested
    if model.supports_resolution(PREFERRED_RESOLUTION):
        return PREFERRED_RESOLUTION
    return model.resolutions[0] if model.resolutions else None


def resolve_image_count(model: ModelConstraint, requested: Optional[int]) -> int:
    """Default 1, clamped to ``[1, max_batch]``."""
    count = requested if requested and requested > 0 else 1
    if count > model.max_batch:
        logger.warning(f"⚠️ {model.name} batches at most {model.max_batch} image(s); {count} requested")
        count = model.max_batch
    return count


def resolve_plugin_target(intent: AbstractIntent, context: Optional[ResolverContext]) -> Optional[str]:
    """
    Find the canvas element a plugin should run on.

    Order: ``references[0]`` → selected image/video/text/image ids →
    selected image index into ``canvasState.images`` → most recent image
    generator node.
    """
    if intent.references:
        return intent.references[0]
    if context is None:
        return None

    state = context.canvas_state
    selection = context.canvas_selection
    if selection is not None:
        for ids in (
            selection.selected_image_modal_ids,
            selection.selected_video_modal_ids,
            selection.selected_rich_text_ids,
            selection.selected_image_ids,
        ):
            if ids:
                return ids[0]
        images = state.images if state else []
        for index in selection.selected_image_indices:
            if 0 <= index < len(images):
                return images[index].element_id or f"canvas-image-{index}"

    if state is not None and state.image_modal_states:
        return state.image_modal_states[-1].id
    return None
