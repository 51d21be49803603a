"""IMAGE_GENERATION: one generator node producing a batch of images."""

from __future__ import annotations

import logging

from canvas_engine.core.capabilities import ModelConstraint
from canvas_engine.core.compiler.context import CompileContext, model_fields, new_step_id
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.plan import CreateNodeStep

logger = logging.getLogger(__name__)

TURBO_IMAGE_MODEL = "z-image-turbo"
_TURBO_STYLE_WORDS = ("fast", "turbo", "quick", "draft")


def _image_model(ctx: CompileContext) -> ModelConstraint:
    style = (ctx.goal.style or "").lower()
    if not ctx.goal.model and any(word in style for word in _TURBO_STYLE_WORDS):
        turbo = ctx.registry.get_model(CapabilityType.IMAGE, TURBO_IMAGE_MODEL)
        if turbo is None:
            turbo = next((m for m in ctx.registry.models(CapabilityType.IMAGE) if m.is_turbo), None)
        if turbo is not None:
            return turbo
    return ctx.pick_model(CapabilityType.IMAGE)


def _image_resolution(model: ModelConstraint, requested: str | None) -> str | None:
    if model.supports_resolution(requested):
        return requested
    if model.supports_resolution("1024"):
        return "1024"
    return model.resolutions[0] if model.resolutions else None


def compile_image_generation(ctx: CompileContext) -> str:
    goal = ctx.goal
    model = _image_model(ctx)
    requested = goal.count or len(goal.references) or 1
    image_count = min(max(requested, 1), model.max_batch)
    if image_count != requested:
        logger.warning(f"⚠️ {model.name} batches at most {model.max_batch} image(s); {requested} requested")

    aspect_ratio = ctx.aspect_ratio(model, fallback="1:1")
    resolution = _image_resolution(model, goal.resolution)
    config: dict = {
        **model_fields(model),
        "prompt": ctx.topic,
        "aspectRatio": aspect_ratio,
        "imageCount": image_count,
    }
    if resolution:
        config["resolution"] = resolution
    if goal.style:
        config["style"] = goal.style
    if goal.references:
        config["referenceIds"] = list(goal.references)

    ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="image-generator",
        count=1,
        config_template=config,
        explanation=f"Generate {image_count} image(s) with {model.name}",
    ))

    lines = [
        f"🖼️ Generate {image_count} image(s): {ctx.topic or 'untitled'}",
        f"• Model: {model.name}",
        f"• Aspect ratio: {aspect_ratio}",
    ]
    if resolution:
        lines.append(f"• Resolution: {resolution}")
    return "\n".join(lines)
