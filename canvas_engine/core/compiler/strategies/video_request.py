"""VIDEO_REQUEST: a stitched sequence of segments sized by the Video Planner."""

from __future__ import annotations

import logging

from canvas_engine.config import get_settings
from canvas_engine.core.compiler.context import CompileContext, format_seconds, model_fields, new_step_id
from canvas_engine.core.compiler.durations import clamp_duration
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.plan import ConnectSequentiallyStep, CreateNodeStep, GroupNodesStep
from canvas_engine.core.planner import VideoPlanRequest, plan_video_execution

logger = logging.getLogger(__name__)


def compile_video_request(ctx: CompileContext) -> str:
    goal = ctx.goal
    total = goal.duration_seconds or get_settings().default_video_request_duration_seconds
    model = ctx.pick_model(CapabilityType.VIDEO)
    if model.temporal and not model.temporal.stitchable and total > model.temporal.max_output_seconds:
        default = ctx.registry.default_model(CapabilityType.VIDEO)
        logger.warning(f"⚠️ {model.name} cannot stitch {format_seconds(total)}; using {default.name}")
        model = default

    topic = ctx.topic or "Video"
    aspect_ratio = ctx.aspect_ratio(model)
    video_plan = plan_video_execution(
        VideoPlanRequest(duration=total, model_id=model.id, prompt=topic, aspect_ratio=aspect_ratio),
        registry=ctx.registry,
    )
    max_output = model.temporal.max_output_seconds
    batch_configs = [
        {
            "duration": clamp_duration(model, node.params["duration"], max_output),
            "prompt": node.params["prompt"],
        }
        for node in video_plan.nodes
    ]
    count = len(batch_configs)

    video_id = ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="video-generator",
        count=count,
        config_template={
            **model_fields(model),
            "prompt": topic,
            "aspectRatio": aspect_ratio,
            "duration": max_output,
            "totalDuration": total,
            "resolution": model.resolutions[0] if model.resolutions else None,
        },
        batch_configs=batch_configs,
        explanation=f"Generate {count} segment(s) with {model.name}",
    ))
    if count > 1:
        ctx.add(ConnectSequentiallyStep(
            id=new_step_id(),
            from_step_id=video_id,
            explanation="Chain the segments in order",
        ))
    ctx.add(GroupNodesStep(
        id=new_step_id(),
        step_ids=[video_id],
        group_type="video-sequence",
        label=f"{topic} ({format_seconds(total)})",
    ))

    return "\n".join([
        f"🎬 Video: {topic}",
        f"• Duration: {format_seconds(total)} in {count} segment(s)",
        f"• Aspect ratio: {aspect_ratio}",
        f"• Model: {model.name}",
    ])
