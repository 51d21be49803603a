"""STORY_VIDEO: script → keyframe images → one video per segment."""

from __future__ import annotations

from canvas_engine.config import get_settings
from canvas_engine.core.compiler.context import CompileContext, format_seconds, model_fields, new_step_id
from canvas_engine.core.compiler.durations import clamp_duration
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.plan import ConnectSequentiallyStep, CreateNodeStep, GroupNodesStep
from canvas_engine.core.planner import split_duration

STORY_SEGMENT_SECONDS = 8


def compile_story_video(ctx: CompileContext) -> str:
    goal = ctx.goal
    total = goal.duration_seconds or get_settings().default_story_duration_seconds
    segments = split_duration(total, STORY_SEGMENT_SECONDS)
    count = len(segments)
    topic = ctx.topic or "an untitled story"

    video_model = ctx.pick_model(CapabilityType.VIDEO)
    image_model = ctx.registry.default_model(CapabilityType.IMAGE)
    aspect_ratio = ctx.aspect_ratio(video_model)

    script_id = ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="text",
        count=1,
        config_template={
            "prompt": f"Write a {count}-scene script for a {format_seconds(total)} story about {topic}",
            "sceneCount": count,
            "style": goal.style,
        },
        explanation="Write the story script",
    ))
    images_id = ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="image-generator",
        count=count,
        config_template={
            **model_fields(image_model),
            "prompt": f"Keyframe for a story about {topic}",
            "aspectRatio": aspect_ratio,
            "imageCount": 1,
        },
        batch_configs=[{"prompt": f"Scene {i + 1} of {count}: {topic}"} for i in range(count)],
        input_from=script_id,
        explanation=f"Generate {count} keyframe image(s) from the script",
    ))
    videos_id = ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="video-generator",
        count=count,
        config_template={
            **model_fields(video_model),
            "aspectRatio": aspect_ratio,
            "duration": clamp_duration(video_model, STORY_SEGMENT_SECONDS, STORY_SEGMENT_SECONDS),
        },
        batch_configs=[
            {"duration": clamp_duration(video_model, seconds, STORY_SEGMENT_SECONDS), "prompt": f"Scene {i + 1}: {topic}"}
            for i, seconds in enumerate(segments)
        ],
        input_from=images_id,
        explanation=f"Animate each keyframe into a video segment with {video_model.name}",
    ))
    ctx.add(ConnectSequentiallyStep(
        id=new_step_id(),
        from_step_id=images_id,
        to_step_id=videos_id,
        explanation="Wire each keyframe to its video segment",
    ))
    ctx.add(GroupNodesStep(
        id=new_step_id(),
        step_ids=[script_id, images_id, videos_id],
        group_type="story-board",
        label=f"Story: {topic}",
    ))

    return "\n".join([
        f"🎬 Story video: {topic}",
        f"• Duration: {format_seconds(total)}",
        f"• Aspect ratio: {aspect_ratio}",
        f"• Segments: {count} × up to {STORY_SEGMENT_SECONDS}s",
        f"• Video model: {video_model.name}",
    ])
