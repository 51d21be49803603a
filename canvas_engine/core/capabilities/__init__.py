"""
Capability registry package.

Public API:
    default_registry() -> CapabilityRegistry       # cached, bundled catalog
    CapabilityRegistry(definitions)                # build a custom / reduced registry
    describe_capabilities(registry) -> str         # Markdown for LLM prompts
"""
from __future__ import annotations

from canvas_engine.core.capabilities.models import (
    CapabilityDefinition,
    ModelConstraint,
    ModelSupports,
    TemporalLimits,
)
from canvas_engine.core.capabilities.registry import (
    REGISTRY_FAMILIES,
    CapabilityRegistry,
    default_registry,
)
from canvas_engine.core.capabilities.formatter import describe_capabilities, format_model

__all__ = [
    "CapabilityDefinition",
    "ModelConstraint",
    "ModelSupports",
    "TemporalLimits",
    "REGISTRY_FAMILIES",
    "CapabilityRegistry",
    "default_registry",
    "describe_capabilities",
    "format_model",
]
