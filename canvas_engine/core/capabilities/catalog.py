"""CAPABILITY_CATALOG — the bundled registry of every generation model.

Temporal envelopes mirror the durations each back-end actually accepts; a model
listed with ``durations`` only takes those discrete values.
"""

from __future__ import annotations

from canvas_engine.core.capabilities.models import (
    CapabilityDefinition,
    ModelConstraint,
    ModelSupports,
    TemporalLimits,
)
from canvas_engine.core.intent_schema.enums import CapabilityType

# ---------------------------------------------------------------------------
# Shared shapes
# ---------------------------------------------------------------------------

_TEXT_ONLY = ModelSupports(text_to_content=True, content_to_content=False)
_TEXT_AND_CONTENT = ModelSupports(text_to_content=True, content_to_content=True)
_CONTENT_ONLY = ModelSupports(text_to_content=False, content_to_content=True)

_RATIOS_BASIC = ("1:1", "16:9", "9:16")
_RATIOS_STANDARD = ("1:1", "16:9", "9:16", "4:3", "3:4")
_RATIOS_WIDE = ("1:1", "16:9", "9:16", "4:3", "3:4", "3:2", "2:3", "21:9")
_RATIOS_VIDEO = ("16:9", "9:16", "1:1")
_RATIOS_SEEDANCE = ("16:9", "4:3", "1:1", "3:4", "9:16", "21:9", "9:21")

_RES_K = ("1K", "2K", "4K")


def _image(model_id: str, name: str, *, supports: ModelSupports = _TEXT_ONLY, **kwargs: object) -> ModelConstraint:
    return ModelConstraint(
        id=model_id, name=name, input_type="text", output_type="image", supports=supports, **kwargs,  # type: ignore[arg-type]
    )


def _video(model_id: str, name: str, temporal: TemporalLimits, *, input_type: str = "text",
           supports: ModelSupports = _TEXT_ONLY, **kwargs: object) -> ModelConstraint:
    return ModelConstraint(
        id=model_id, name=name, input_type=input_type, output_type="video",
        supports=supports, temporal=temporal, is_high_res=kwargs.pop("is_high_res", True),  # type: ignore[arg-type]
        **kwargs,  # type: ignore[arg-type]
    )


def _plugin(model_id: str, name: str, *, aspect_ratios: tuple[str, ...] = (),
            parameters: tuple[tuple[str, str], ...] = (), **kwargs: object) -> ModelConstraint:
    return ModelConstraint(
        id=model_id, name=name, input_type=str(kwargs.pop("input_type", "image")), output_type="image",
        supports=kwargs.pop("supports", _CONTENT_ONLY),  # type: ignore[arg-type]
        aspect_ratios=aspect_ratios, parameters=parameters, **kwargs,  # type: ignore[arg-type]
    )


def _audio(model_id: str, name: str, *, parameters: tuple[tuple[str, str], ...] = (), **kwargs: object) -> ModelConstraint:
    return ModelConstraint(
        id=model_id, name=name, input_type=str(kwargs.pop("input_type", "text")), output_type="audio",
        supports=kwargs.pop("supports", _TEXT_ONLY), parameters=parameters, **kwargs,  # type: ignore[arg-type]
    )


# ---------------------------------------------------------------------------
# IMAGE
# ---------------------------------------------------------------------------

_IMAGE_MODELS = (
    _image("z-image-turbo", "Z Image Turbo", supports=_TEXT_AND_CONTENT, resolutions=("1024",),
           aspect_ratios=_RATIOS_BASIC, max_batch=4, is_turbo=True, strengths=("fast", "turbo", "draft")),
    _image("google-nano-banana", "Google Nano Banana", supports=_TEXT_AND_CONTENT, resolutions=("1024", "1440"),
           aspect_ratios=_RATIOS_STANDARD, max_batch=4, is_default=True, is_turbo=True,
           strengths=("fast", "sketch", "draft")),
    _image("google-nano-banana-pro", "Google nano banana pro", supports=_TEXT_AND_CONTENT, resolutions=_RES_K,
           aspect_ratios=_RATIOS_STANDARD, max_batch=4, is_high_res=True, strengths=("balanced", "standard")),
    _image("flux-2-pro", "Flux 2 pro", supports=_TEXT_AND_CONTENT, resolutions=("1K", "2K", "1024x2048"),
           aspect_ratios=_RATIOS_WIDE + ("9:21", "16:10", "10:16"), is_high_res=True,
           strengths=("quality", "rich", "detailed")),
    _image("flux-kontext-max", "Flux Kontext Max", supports=_TEXT_AND_CONTENT, resolutions=("1K", "2K"),
           aspect_ratios=_RATIOS_BASIC, is_high_res=True, strengths=("context", "large-scale")),
    _image("flux-kontext-pro", "Flux Kontext Pro", supports=_TEXT_AND_CONTENT, resolutions=("1K", "2K"),
           aspect_ratios=_RATIOS_BASIC, is_high_res=True),
    _image("seedream-v4", "Seedream v4", resolutions=_RES_K, aspect_ratios=_RATIOS_WIDE, is_high_res=True,
           strengths=("artistic", "surreal", "dreamy")),
    _image("seedream-v4-4k", "Seedream v4 4K", supports=_TEXT_AND_CONTENT, resolutions=_RES_K,
           aspect_ratios=_RATIOS_WIDE, is_high_res=True, strengths=("4k", "ultra-hd")),
    _image("flux-1.1-pro", "Flux 1.1 Pro", resolutions=("1024x1024", "1024x768", "768x1024"),
           aspect_ratios=("1:1", "4:3", "3:4", "16:9", "9:16"), max_batch=4, is_high_res=True,
           strengths=("realistic", "prompt-adherence", "text-rendering"), quality_tier="standard"),
    _image("midjourney-v6", "Midjourney v6", resolutions=("1024x1024",),
           aspect_ratios=("1:1", "16:9", "9:16", "2:3", "3:2"), max_batch=4, is_high_res=True,
           strengths=("artistic", "lighting", "composition"), quality_tier="cinematic"),
    _image("seedream-4.5", "Seedream 4.5", supports=_TEXT_AND_CONTENT, resolutions=_RES_K,
           aspect_ratios=_RATIOS_WIDE, is_high_res=True, strengths=("latest", "vibrant")),
    _image("imagen-4", "Imagen 4", resolutions=("1K", "2K"), aspect_ratios=_RATIOS_STANDARD, is_high_res=True,
           strengths=("photorealistic", "google")),
    _image("imagen-4-fast", "Imagen 4 Fast", aspect_ratios=_RATIOS_BASIC, max_batch=4, is_turbo=True,
           strengths=("speed", "quick")),
    _image("imagen-4-ultra", "Imagen 4 Ultra", resolutions=_RES_K, aspect_ratios=_RATIOS_BASIC, is_high_res=True,
           strengths=("ultra-quality", "premium")),
    _image("flux-pro-1.1", "Flux Pro 1.1", resolutions=("1K", "2K"),
           aspect_ratios=("1:1", "16:9", "9:16", "21:9", "9:21"), is_high_res=True),
    _image("flux-pro-1.1-ultra", "Flux Pro 1.1 Ultra", resolutions=("1K", "2K"),
           aspect_ratios=("1:1", "16:9", "9:16", "21:9", "9:21"), is_high_res=True),
    _image("chatgpt-1.5", "ChatGPT 1.5", resolutions=("1024",), aspect_ratios=("1:1", "3:2", "2:3"),
           strengths=("dalle", "conversational")),
    _image("p-image", "P-Image", resolutions=("512", "768", "1024", "1280", "1440"),
           aspect_ratios=_RATIOS_WIDE[:-1], max_batch=4, is_turbo=True),
)

# ---------------------------------------------------------------------------
# VIDEO
# ---------------------------------------------------------------------------

_VIDEO_MODELS = (
    _video("sora-2-pro", "Sora 2 Pro",
           TemporalLimits(max_output_seconds=12, max_input_seconds=60, stitchable=True, durations=(4, 8, 12)),
           resolutions=("720p", "1080p"), aspect_ratios=("16:9", "9:16"),
           strengths=("realistic", "complex-motion"), quality_tier="realistic"),
    _video("veo-3.1", "Veo 3.1",
           TemporalLimits(max_output_seconds=8, max_input_seconds=60, stitchable=True, durations=(4, 6, 8)),
           supports=ModelSupports(text_to_content=True, content_to_content=True, multimodal=True),
           resolutions=("720p", "1080p"), aspect_ratios=_RATIOS_VIDEO, is_default=True,
           strengths=("realistic", "cinematic"), quality_tier="cinematic"),
    _video("veo-3.1-fast", "Veo 3.1 Fast",
           TemporalLimits(max_output_seconds=8, max_input_seconds=60, stitchable=True, durations=(4, 6, 8)),
           supports=_TEXT_AND_CONTENT, resolutions=("720p", "1080p"), aspect_ratios=_RATIOS_VIDEO,
           is_turbo=True, strengths=("fast", "first-last-frame"), quality_tier="fast"),
    _video("kling-2.5-turbo-pro", "Kling 2.5 Turbo Pro",
           TemporalLimits(max_output_seconds=10, max_input_seconds=5, stitchable=True, durations=(5, 10)),
           resolutions=("720p", "1080p"), aspect_ratios=_RATIOS_VIDEO, is_turbo=True,
           strengths=("fast", "motion"), quality_tier="fast"),
    _video("seedance-1.0-pro", "Seedance 1.0 Pro",
           TemporalLimits(max_output_seconds=12, max_input_seconds=12, stitchable=True, min_output_seconds=2),
           input_type="image", supports=_TEXT_AND_CONTENT, resolutions=("480p", "720p", "1080p"),
           aspect_ratios=_RATIOS_SEEDANCE, strengths=("animation", "dance", "character-consistency"),
           quality_tier="character-consistency"),
    _video("seedance-1.0-lite", "Seedance 1.0 Lite",
           TemporalLimits(max_output_seconds=12, max_input_seconds=12, stitchable=True, min_output_seconds=2),
           input_type="image", supports=_TEXT_AND_CONTENT, resolutions=("480p", "720p", "1080p"),
           aspect_ratios=_RATIOS_SEEDANCE, is_high_res=False, is_turbo=True),
    _video("pixverse-v5", "PixVerse v5",
           TemporalLimits(max_output_seconds=8, max_input_seconds=5, stitchable=True, durations=(5, 8)),
           resolutions=("360p", "540p", "720p", "1080p"), aspect_ratios=_RATIOS_VIDEO),
    _video("ltx-v2-pro", "LTX V2 Pro",
           TemporalLimits(max_output_seconds=10, max_input_seconds=10, stitchable=True, durations=(6, 8, 10)),
           resolutions=("1080p", "1440p", "2160p"), aspect_ratios=("16:9", "9:16")),
    _video("ltx-v2-fast", "LTX V2 Fast",
           TemporalLimits(max_output_seconds=10, max_input_seconds=10, stitchable=True, durations=(6, 8, 10)),
           resolutions=("1080p", "1440p", "2160p"), aspect_ratios=("16:9", "9:16"), is_turbo=True),
    _video("wan-2.5", "WAN 2.5",
           TemporalLimits(max_output_seconds=10, max_input_seconds=5, stitchable=True, durations=(5, 10)),
           input_type="image", resolutions=("480p", "720p", "1080p"), aspect_ratios=_RATIOS_VIDEO),
    _video("wan-2.5-fast", "WAN 2.5 Fast",
           TemporalLimits(max_output_seconds=10, max_input_seconds=5, stitchable=True, durations=(5, 10)),
           input_type="image", resolutions=("480p", "720p", "1080p"), aspect_ratios=_RATIOS_VIDEO, is_turbo=True),
    _video("minimax-hailuo-02", "MiniMax-Hailuo-02",
           TemporalLimits(max_output_seconds=10, max_input_seconds=6, stitchable=True, durations=(6, 10)),
           resolutions=("768P", "1080P"), aspect_ratios=_RATIOS_VIDEO),
    # Director modes render standalone shots; they cannot be chained.
    _video("t2v-01-director", "T2V-01-Director",
           TemporalLimits(max_output_seconds=6, max_input_seconds=5, stitchable=False, durations=(6,)),
           resolutions=("720P",), aspect_ratios=_RATIOS_VIDEO, is_high_res=False,
           strengths=("camera-control", "director-mode")),
)

# ---------------------------------------------------------------------------
# TEXT
# ---------------------------------------------------------------------------

_TEXT_MODELS = (
    ModelConstraint(id="standard", name="Standard Text", input_type="none", output_type="text",
                    supports=_TEXT_ONLY, is_default=True),
    ModelConstraint(id="rich", name="Rich Text", input_type="none", output_type="text", supports=_TEXT_ONLY),
)

# ---------------------------------------------------------------------------
# PLUGIN
# ---------------------------------------------------------------------------

_PLUGIN_MODELS = (
    _plugin("upscale", "Crystal Upscaler", is_default=True, is_high_res=True),
    _plugin("crystal-upscaler", "Crystal Upscaler", is_high_res=True),
    _plugin("topaz-upscaler", "Topaz Upscaler", is_high_res=True),
    _plugin("real-esrgan", "Real-ESRGAN", is_high_res=True,
            parameters=(("faceEnhance", "boolean (default false)"),)),
    _plugin("remove-bg", "Remove BG", parameters=(
        ("backgroundType", "string (green, rgba (transparent), white, blue, overlay, map)"),
        ("scaleValue", "number (default 0.5)"),
    )),
    _plugin("multiangle-camera", "Multiangle Camera", is_high_res=True,
            aspect_ratios=("match_input_image",) + _RATIOS_STANDARD, parameters=(
                ("prompt", "string (optional)"),
                ("loraScale", "number 0-4 (default 1.25)"),
                ("moveForward", "number 0-10 (default 0)"),
                ("verticalTilt", "number -1 to 1 (default 0)"),
                ("rotateDegrees", "number -90 to 90 (default 0)"),
                ("useWideAngle", "boolean (default false)"),
            )),
    _plugin("erase-replace", "Erase / Replace", is_high_res=True, aspect_ratios=("1:1",),
            parameters=(("prompt", "string (optional - for replacement)"),)),
    _plugin("expand-image", "Expand Image", is_high_res=True, aspect_ratios=_RATIOS_STANDARD + ("custom",),
            parameters=(("prompt", "string (optional)"), ("aspectRatio", "string (1:1, 16:9, etc or custom)"))),
    _plugin("vectorize-image", "Vectorize Image", parameters=(("mode", "string (simple, detailed)"),)),
    _plugin("next-scene", "Next Scene", is_high_res=True, aspect_ratios=_RATIOS_STANDARD + ("21:9",), parameters=(
        ("mode", "string (scene, nextscene, multiangle)"),
        ("prompt", "string (optional)"),
        ("loraScale", "number 0-4 (default 1.15)"),
    )),
    _plugin("storyboard-generator", "Storyboard Generator", input_type="text", supports=_TEXT_ONLY,
            is_high_res=True, aspect_ratios=("16:9",), parameters=(
                ("characterInput", "string (optional)"),
                ("backgroundDescription", "string (optional)"),
                ("scriptText", "string (required - the story script)"),
            )),
    _plugin("compare-image-models", "Compare Models", input_type="text", supports=_TEXT_ONLY,
            aspect_ratios=("1:1",), parameters=(
                ("prompt", "string (required)"),
                ("models", "string (comma-separated model names)"),
            )),
)

# ---------------------------------------------------------------------------
# MUSIC
# ---------------------------------------------------------------------------

_MUSIC_MODELS = (
    _audio("music-generation", "Music Generation (MiniMax)", is_default=True, is_high_res=True, parameters=(
        ("prompt", "string (description of music)"),
        ("lyricsPrompt", "string (optional lyrics)"),
        ("isLyricsDisabled", "boolean"),
    )),
    _audio("udio-v2", "Udio v2", supports=_TEXT_AND_CONTENT, is_high_res=True, quality_tier="high-fidelity"),
    _audio("suno-v3.5", "Suno v3.5", supports=_TEXT_AND_CONTENT, is_high_res=True, is_turbo=True,
           quality_tier="fast"),
    _audio("voice-generation-elevenlabs", "Voice Generation (ElevenLabs)", parameters=(
        ("prompt", "string (text to speak)"),
        ("voiceId", "string (optional)"),
        ("speed", "number 0.5-2"),
    )),
    _audio("voice-generation-chatterbox", "Voice Generation (Chatterbox)", parameters=(
        ("prompt", "string (text to speak)"),
        ("language", "string (mapped to voiceId)"),
    )),
    _audio("voice-generation-maya", "Voice Generation (Maya)", parameters=(
        ("prompt", "string (text to speak)"),
        ("voicePrompt", "string (description of voice)"),
    )),
    _audio("dialogue-generation", "Dialogue Generation", parameters=(
        ("dialogueInputs", "array (objects with speaker and text)"),
    )),
    _audio("sfx-generation", "Sound Effects (SFX)", parameters=(
        ("prompt", "string (description of sound)"),
        ("duration", "number (seconds)"),
        ("loop", "boolean"),
    )),
    _audio("voice-cloning", "Voice Cloning", input_type="audio", supports=_TEXT_AND_CONTENT, parameters=(
        ("prompt", "string (text to speak with cloned voice)"),
        ("voicePrompt", "string (reference audio or description)"),
    )),
)


CAPABILITY_CATALOG: dict[CapabilityType, CapabilityDefinition] = {
    CapabilityType.IMAGE: CapabilityDefinition(id=CapabilityType.IMAGE, models=_IMAGE_MODELS),
    CapabilityType.VIDEO: CapabilityDefinition(id=CapabilityType.VIDEO, models=_VIDEO_MODELS),
    CapabilityType.TEXT: CapabilityDefinition(id=CapabilityType.TEXT, models=_TEXT_MODELS),
    CapabilityType.PLUGIN: CapabilityDefinition(id=CapabilityType.PLUGIN, models=_PLUGIN_MODELS),
    CapabilityType.MUSIC: CapabilityDefinition(id=CapabilityType.MUSIC, models=_MUSIC_MODELS),
}
