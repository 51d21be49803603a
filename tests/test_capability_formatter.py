"""Tests for the Markdown capability description."""
from __future__ import annotations

from canvas_engine.core.capabilities import CapabilityRegistry, describe_capabilities, format_model
from canvas_engine.core.intent_schema import CapabilityType


class TestDescribeCapabilities:
    def test_full_registry(self, registry):
        text = describe_capabilities(registry)
        assert text.startswith("# WILDMIND CANVAS CAPABILITIES")
        for section in ("IMAGE GENERATION MODELS", "VIDEO GENERATION MODELS", "PLUGINS & TOOLS", "KEY CONCEPTS"):
            assert f"## {section}" in text
        assert "**Veo 3.1** (veo-3.1)" in text

    def test_single_family(self, registry):
        text = describe_capabilities(registry, [CapabilityType.VIDEO], include_concepts=False)
        assert "## VIDEO GENERATION MODELS" in text
        assert "IMAGE GENERATION MODELS" not in text
        assert "KEY CONCEPTS" not in text

    def test_skips_absent_family(self, small_registry):
        image_only = CapabilityRegistry({CapabilityType.IMAGE: small_registry.get(CapabilityType.IMAGE)})
        text = describe_capabilities(image_only, [CapabilityType.MUSIC, CapabilityType.IMAGE])
        assert "Basic Image" in text
        assert "MUSIC & AUDIO" not in text


class TestFormatModel:
    def test_discrete_video_model(self, registry):
        text = format_model(registry.get_model(CapabilityType.VIDEO, "veo-3.1"), CapabilityType.VIDEO)
        assert "Text-to-Video + Image-to-Video" in text
        assert "stitchable: Yes; allowed: 4s, 6s, 8s" in text

    def test_continuous_video_model(self, registry):
        text = format_model(registry.get_model(CapabilityType.VIDEO, "seedance-1.0-pro"), CapabilityType.VIDEO)
        assert "allowed: 2-12s" in text

    def test_non_stitchable(self, registry):
        text = format_model(registry.get_model(CapabilityType.VIDEO, "t2v-01-director"), CapabilityType.VIDEO)
        assert "stitchable: No" in text

    def test_image_batch(self, registry):
        text = format_model(registry.get_model(CapabilityType.IMAGE, "google-nano-banana"), CapabilityType.IMAGE)
        assert "Max Batch: 4" in text
        assert "Resolutions: 1024, 1440" in text

    def test_plugin_parameters(self, registry):
        text = format_model(registry.get_model(CapabilityType.PLUGIN, "vectorize-image"), CapabilityType.PLUGIN)
        assert "Parameters: mode (string (simple, detailed))" in text
        assert "Resolutions" not in text
