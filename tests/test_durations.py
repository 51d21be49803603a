"""
Tests for duration and resolution clamping.

Discrete sets snap to the nearest allowed value (ties go up); continuous
ranges clamp then round.  Valid values always pass through unchanged.
"""
from __future__ import annotations

import pytest

from canvas_engine.core.capabilities import ModelConstraint, ModelSupports
from canvas_engine.core.compiler import clamp_duration, nearest_valid_duration, normalize_resolution
from canvas_engine.core.intent_schema import CapabilityType
from canvas_engine.errors import MissingTemporalEnvelopeError


@pytest.fixture
def veo(registry):
    return registry.get_model(CapabilityType.VIDEO, "veo-3.1")


@pytest.fixture
def seedance(registry):
    return registry.get_model(CapabilityType.VIDEO, "seedance-1.0-pro")


class TestDiscreteDurations:
    @pytest.mark.parametrize("requested", [4, 6, 8, 6.0])
    def test_valid_value_preserved(self, veo, requested):
        assert clamp_duration(veo, requested, 6) == requested

    @pytest.mark.parametrize("requested,expected", [
        (1, 4), (3, 4), (4.9, 4), (5, 6), (6.5, 6), (7, 8), (20, 8),
    ])
    def test_invalid_value_snaps(self, veo, requested, expected):
        assert clamp_duration(veo, requested, 6) == expected

    def test_unspecified_uses_default(self, veo):
        assert clamp_duration(veo, None, 6) == 6

    def test_unspecified_default_is_snapped(self, veo):
        assert clamp_duration(veo, None, 5) == 6

    def test_veo_bucketing(self, veo):
        """Equivalent to: < 5 → 4, < 7 → 6, else 8."""
        for tenths in range(5, 130, 5):
            seconds = tenths / 10
            expected = 4 if seconds < 5 else 6 if seconds < 7 else 8
            assert nearest_valid_duration(veo.temporal, seconds) == expected, seconds


class TestContinuousDurations:
    @pytest.mark.parametrize("requested,expected", [(2, 2), (7.4, 7), (7.5, 8), (11.6, 12), (12, 12)])
    def test_in_range_rounded(self, seedance, requested, expected):
        assert clamp_duration(seedance, requested, 6) == expected

    @pytest.mark.parametrize("requested,expected", [(1, 2), (0.5, 2), (15, 12), (40, 12)])
    def test_out_of_range_clamped(self, seedance, requested, expected):
        assert clamp_duration(seedance, requested, 6) == expected

    def test_unspecified_uses_default(self, seedance):
        assert clamp_duration(seedance, None, 6) == 6


class TestIdempotence:
    def test_clamping_valid_duration_is_identity(self, registry):
        """For every model, an already-valid duration comes back unchanged."""
        for model in registry.models(CapabilityType.VIDEO):
            limits = model.temporal
            valid = limits.durations or range(limits.lower_bound, limits.upper_bound + 1)
            for seconds in valid:
                assert clamp_duration(model, seconds, seconds) == seconds, model.id
                once = clamp_duration(model, seconds + 0.3, seconds)
                assert clamp_duration(model, once, seconds) == once, model.id

    def test_missing_temporal_raises(self):
        model = ModelConstraint(id="x", name="X", input_type="text", output_type="video",
                                supports=ModelSupports(text_to_content=True, content_to_content=False))
        with pytest.raises(MissingTemporalEnvelopeError):
            clamp_duration(model, 5, 5)


class TestNormalizeResolution:
    @pytest.mark.parametrize("requested,expected", [
        ("1080", "1080p"), ("1080p", "1080p"), ("1080P", "1080p"), (" 720 ", "720p"),
    ])
    def test_matches_supported(self, veo, requested, expected):
        assert normalize_resolution(veo, requested) == expected

    @pytest.mark.parametrize("requested", ["4k", "2160", None, ""])
    def test_falls_back_to_first(self, veo, requested):
        assert normalize_resolution(veo, requested) == "720p"

    def test_returns_model_spelling(self, registry):
        """Matching is case-insensitive but keeps the model's own spelling."""
        hailuo = registry.get_model(CapabilityType.VIDEO, "minimax-hailuo-02")
        assert normalize_resolution(hailuo, "1080p") == "1080P"
        assert normalize_resolution(hailuo, "768") == "768P"
