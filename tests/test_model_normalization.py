"""
Tests for model-name normalization.

Free-text model names map to canonical registry ids through the alias
table, then through the registry's own ids and display names.
"""
from __future__ import annotations

import pytest

from canvas_engine.core.compiler import MODEL_ALIASES, compact_model_key, normalize_model_name
from canvas_engine.core.intent_schema import CapabilityType


class TestCompactKey:
    def test_strips_separators_and_case(self):
        assert compact_model_key("Veo 3.1-Fast") == "veo31fast"
        assert compact_model_key("  seedance_1.0/pro ") == "seedance10pro"


class TestNormalizeModelName:
    @pytest.mark.parametrize("raw", ["veo3.1 fast", "veo-3.1-fast", "Veo 3.1 Fast", "VEO_3.1_FAST", "veo 3 fast"])
    def test_veo_fast_variants(self, registry, raw):
        assert normalize_model_name(raw, registry) == "veo-3.1-fast"

    @pytest.mark.parametrize("raw", ["veo3.1", "Veo 3.1", "veo", "veo-3.1"])
    def test_veo_variants(self, registry, raw):
        assert normalize_model_name(raw, registry) == "veo-3.1"

    @pytest.mark.parametrize("raw,expected", [
        ("seedance", "seedance-1.0-pro"),
        ("Seedance 1.0 Lite", "seedance-1.0-lite"),
        ("Google Nano Banana", "google-nano-banana"),
        ("flux-1.1-pro", "flux-1.1-pro"),
        ("T2V-01-Director", "t2v-01-director"),
        ("kling", "kling-2.5-turbo-pro"),
    ])
    def test_other_models(self, registry, raw, expected):
        assert normalize_model_name(raw, registry) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "not-a-model"])
    def test_no_match(self, registry, raw):
        assert normalize_model_name(raw, registry) is None

    def test_scoped_to_family(self, registry):
        assert normalize_model_name("veo", registry, CapabilityType.IMAGE) is None
        assert normalize_model_name("udio", registry, CapabilityType.MUSIC) == "udio-v2"

    def test_uses_default_registry(self):
        assert normalize_model_name("veo 3.1 fast") == "veo-3.1-fast"

    def test_alias_targets_exist(self, registry):
        """Every alias points at a real model in the bundled catalog."""
        all_ids = {m.id for definition in registry for m in definition.models}
        assert set(MODEL_ALIASES.values()) <= all_ids

    def test_alias_absent_from_reduced_registry(self, small_registry):
        """Aliases only resolve when their target is in the registry in use."""
        assert normalize_model_name("veo", small_registry) is None
        assert normalize_model_name("Clip Four", small_registry) == "clip-4"
