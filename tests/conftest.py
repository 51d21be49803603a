"""Pytest configuration and fixtures."""
from __future__ import annotations

import pytest

from canvas_engine.core.capabilities import (
    CapabilityDefinition,
    CapabilityRegistry,
    ModelConstraint,
    ModelSupports,
    TemporalLimits,
    default_registry,
)
from canvas_engine.core.intent_schema import CapabilityType

TEXT_ONLY = ModelSupports(text_to_content=True, content_to_content=False)
TEXT_AND_CONTENT = ModelSupports(text_to_content=True, content_to_content=True)


@pytest.fixture
def registry() -> CapabilityRegistry:
    """The bundled catalog."""
    return default_registry()


@pytest.fixture
def small_registry() -> CapabilityRegistry:
    """A reduced registry with one model for each edge the engine cares about."""
    return CapabilityRegistry({
        CapabilityType.IMAGE: CapabilityDefinition(id=CapabilityType.IMAGE, models=(
            ModelConstraint(id="basic-image", name="Basic Image", input_type="text", output_type="image",
                            supports=TEXT_ONLY, resolutions=("512", "1024"), aspect_ratios=("1:1", "16:9"),
                            max_batch=2, is_default=True),
            ModelConstraint(id="edit-image", name="Edit Image", input_type="image", output_type="image",
                            supports=TEXT_AND_CONTENT, resolutions=("2K",), aspect_ratios=("4:3",)),
        )),
        CapabilityType.VIDEO: CapabilityDefinition(id=CapabilityType.VIDEO, models=(
            ModelConstraint(id="clip-4", name="Clip Four", input_type="text", output_type="video",
                            supports=TEXT_AND_CONTENT, resolutions=("720p",), aspect_ratios=("16:9",),
                            is_default=True,
                            temporal=TemporalLimits(max_output_seconds=4, stitchable=True, durations=(2, 4))),
            ModelConstraint(id="long-range", name="Long Range", input_type="text", output_type="video",
                            supports=TEXT_ONLY, resolutions=("480p", "1080p"), aspect_ratios=("16:9", "9:16"),
                            temporal=TemporalLimits(max_output_seconds=10, stitchable=True, min_output_seconds=3)),
            ModelConstraint(id="solo-shot", name="Solo Shot", input_type="text", output_type="video",
                            supports=TEXT_ONLY, resolutions=("720P",), aspect_ratios=("16:9",),
                            temporal=TemporalLimits(max_output_seconds=5, stitchable=False, durations=(5,))),
            ModelConstraint(id="no-temporal", name="No Temporal", input_type="text", output_type="video",
                            supports=TEXT_ONLY),
        )),
        CapabilityType.TEXT: CapabilityDefinition(id=CapabilityType.TEXT, models=(
            ModelConstraint(id="standard", name="Standard Text", input_type="none", output_type="text",
                            supports=TEXT_ONLY, is_default=True),
        )),
        CapabilityType.PLUGIN: CapabilityDefinition(id=CapabilityType.PLUGIN, models=(
            ModelConstraint(id="upscale", name="Upscaler", input_type="image", output_type="image",
                            supports=TEXT_AND_CONTENT, is_default=True),
            ModelConstraint(id="remove-bg", name="Remove BG", input_type="image", output_type="image",
                            supports=TEXT_AND_CONTENT),
        )),
        CapabilityType.MUSIC: CapabilityDefinition(id=CapabilityType.MUSIC, models=(
            ModelConstraint(id="tune", name="Tune", input_type="text", output_type="audio",
                            supports=TEXT_ONLY, is_default=True),
        )),
    })
