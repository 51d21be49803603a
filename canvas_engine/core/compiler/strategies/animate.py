"""IMAGE_ANIMATE: one video node from zero, one or two source images."""

from __future__ import annotations

from canvas_engine.core.capabilities import ModelConstraint
from canvas_engine.core.compiler.context import CompileContext, format_seconds, model_fields, new_step_id
from canvas_engine.core.compiler.durations import clamp_duration, normalize_resolution
from canvas_engine.core.compiler.validation import FIRST_LAST_FRAME
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.plan import CreateNodeStep

ANIMATE_DEFAULT_SECONDS = 6
FAST_ANIMATE_MODEL = "veo-3.1-fast"
LONG_ANIMATE_MODEL = "seedance-1.0-pro"


def _model_for_duration(seconds: float) -> str:
    if 4 <= seconds <= 8:
        return FAST_ANIMATE_MODEL
    if 9 <= seconds <= 12:
        return LONG_ANIMATE_MODEL
    return FAST_ANIMATE_MODEL


def _animate_model(ctx: CompileContext) -> ModelConstraint:
    seconds = ctx.goal.duration_seconds or ANIMATE_DEFAULT_SECONDS
    return ctx.pick_model(CapabilityType.VIDEO, fallback_id=_model_for_duration(seconds))


def compile_image_animate(ctx: CompileContext) -> str:
    goal = ctx.goal
    model = _animate_model(ctx)
    duration = clamp_duration(model, goal.duration_seconds, ANIMATE_DEFAULT_SECONDS)
    resolution = normalize_resolution(model, goal.resolution)
    aspect_ratio = ctx.aspect_ratio(model)
    refs = goal.references
    prompt = ctx.topic or "Animate the image"

    config: dict = {
        **model_fields(model),
        "prompt": prompt,
        "duration": duration,
        "aspectRatio": aspect_ratio,
        "resolution": resolution,
    }
    if len(refs) == 2:
        config.update(connectionType=FIRST_LAST_FRAME, firstFrameId=refs[0], lastFrameId=refs[1])
    elif refs:
        config.update(connectionType="IMAGE_TO_VIDEO", sourceImageId=refs[0], referenceIds=list(refs))

    ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="video-generator",
        count=1,
        config_template=config,
        explanation=f"Animate with {model.name} for {format_seconds(duration)}",
    ))

    lines = [
        "🎥 Animate image",
        f"• Duration: {format_seconds(duration)}",
        f"• Aspect ratio: {aspect_ratio}",
        f"• Resolution: {resolution or 'default'}",
        f"• Model: {model.name}",
        f"• Prompt: {prompt}",
    ]
    if len(refs) == 2:
        lines.append(f"• First frame and last frame: {refs[0]} → {refs[1]}")
    return "\n".join(lines)
