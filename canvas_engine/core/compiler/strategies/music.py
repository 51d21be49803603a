"""MUSIC_VIDEO: a song plus a fixed four-scene visual montage driven by it."""

from __future__ import annotations

from canvas_engine.core.compiler.context import CompileContext, model_fields, new_step_id
from canvas_engine.core.compiler.durations import clamp_duration
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.plan import CreateNodeStep

MONTAGE_SCENES = 4
MONTAGE_SCENE_SECONDS = 8


def compile_music_video(ctx: CompileContext) -> str:
    topic = ctx.topic or "an original song"
    music_model = ctx.pick_model(CapabilityType.MUSIC)
    video_model = ctx.registry.default_model(CapabilityType.VIDEO)
    aspect_ratio = ctx.aspect_ratio(video_model)

    music_id = ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="music-generator",
        count=1,
        config_template={**model_fields(music_model), "prompt": f"Music about {topic}", "style": ctx.goal.style},
        explanation="Compose the song",
    ))
    ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="video-generator",
        count=MONTAGE_SCENES,
        config_template={
            **model_fields(video_model),
            "prompt": f"Visuals for {topic}",
            "aspectRatio": aspect_ratio,
            "duration": clamp_duration(video_model, None, MONTAGE_SCENE_SECONDS),
        },
        input_from=music_id,
        explanation=f"Generate {MONTAGE_SCENES} montage scenes for the song",
    ))

    return "\n".join([
        f"🎵 Music video: {topic}",
        f"• Music model: {music_model.name}",
        f"• Visuals: {MONTAGE_SCENES} scenes with {video_model.name} ({aspect_ratio})",
    ])
