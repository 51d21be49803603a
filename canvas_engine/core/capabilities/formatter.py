"""Render the capability registry as Markdown for an upstream LLM prompt."""

from __future__ import annotations

from canvas_engine.core.capabilities.models import ModelConstraint
from canvas_engine.core.capabilities.registry import CapabilityRegistry
from canvas_engine.core.intent_schema.enums import CapabilityType

_SECTION_TITLES: dict[CapabilityType, str] = {
    CapabilityType.IMAGE: "IMAGE GENERATION MODELS",
    CapabilityType.VIDEO: "VIDEO GENERATION MODELS",
    CapabilityType.MUSIC: "MUSIC & AUDIO MODELS",
    CapabilityType.TEXT: "TEXT MODELS",
    CapabilityType.PLUGIN: "PLUGINS & TOOLS",
}

_MODE_LABELS: dict[CapabilityType, tuple[str, str]] = {
    CapabilityType.IMAGE: ("Text-to-Image", "Image-to-Image"),
    CapabilityType.VIDEO: ("Text-to-Video", "Image-to-Video"),
}

KEY_CONCEPTS = """## KEY CONCEPTS

1. **Image-to-Image (I2I)**: Transform existing images using models that support contentToContent
2. **Text-to-Image (T2I)**: Generate images from text prompts
3. **Image-to-Video (I2V)**: Animate static images into videos
4. **Text-to-Video (T2V)**: Generate videos from text prompts
5. **Video Stitching**: Connect multiple video segments sequentially (models with stitchable: true)
6. **First & Last Frame**: Veo 3.1 Fast accepts 2 images (first frame + last frame) for a single video
7. **Sequential Frames**: One image frame per video segment, videos connected sequentially
"""


def _format_modes(model: ModelConstraint, family: CapabilityType) -> str | None:
    labels = _MODE_LABELS.get(family)
    if labels is None:
        return None
    modes = []
    if model.supports.text_to_content:
        modes.append(labels[0])
    if model.supports.content_to_content:
        modes.append(labels[1])
    return " + ".join(modes) or None


def format_model(model: ModelConstraint, family: CapabilityType) -> str:
    """One Markdown bullet block for a model."""
    lines = [
        f"- **{model.name}** ({model.id})",
        f"  - Input: {model.input_type}, Output: {model.output_type}",
    ]
    modes = _format_modes(model, family)
    if modes:
        lines.append(f"  - Supports: {modes}")
    if model.temporal:
        t = model.temporal
        allowed = (
            ", ".join(f"{d}s" for d in t.durations) if t.is_discrete
            else f"{t.min_output_seconds}-{t.max_output_seconds}s"
        )
        lines.append(
            f"  - Max Duration: {t.max_output_seconds}s (stitchable: {'Yes' if t.stitchable else 'No'}; allowed: {allowed})"
        )
    if family in (CapabilityType.IMAGE, CapabilityType.VIDEO):
        lines.append(f"  - Resolutions: {', '.join(model.resolutions) or 'Various'}")
        lines.append(f"  - Aspect Ratios: {', '.join(model.aspect_ratios)}")
        if model.max_batch > 1:
            lines.append(f"  - Max Batch: {model.max_batch}")
    if model.parameters:
        lines.append("  - Parameters: " + ", ".join(f"{k} ({desc})" for k, desc in model.parameters))
    if model.strengths:
        lines.append(f"  - Strengths: {', '.join(model.strengths)}")
    return "\n".join(lines)


def describe_capabilities(
    registry: CapabilityRegistry,
    families: list[CapabilityType] | None = None,
    include_concepts: bool = True,
) -> str:
    """Format the registry (or selected families) as Markdown."""
    wanted = families or [f for f in _SECTION_TITLES if registry.has_family(f)]
    parts = [
        "# WILDMIND CANVAS CAPABILITIES\n",
        "This canvas system has the following capabilities, models, and plugins available:\n",
    ]
    for family in wanted:
        if not registry.has_family(family):
            continue
        parts.append(f"## {_SECTION_TITLES.get(family, family.value)}\n")
        parts.extend(format_model(m, family) + "\n" for m in registry.models(family))
    if include_concepts:
        parts.append(KEY_CONCEPTS)
    return "\n".join(parts)
