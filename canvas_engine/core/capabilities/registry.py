"""
Capability Registry for the canvas engine.

The registry is the **sole source of truth** for what generation is possible.
It is built once and never mutated: components receive it as a constructor
argument so tests can substitute a reduced registry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from canvas_engine.core.capabilities.models import CapabilityDefinition, ModelConstraint
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.errors import CapabilityConfigError

logger = logging.getLogger(__name__)

# Families that exist in the catalog; every other CapabilityType is an input alias.
REGISTRY_FAMILIES: tuple[CapabilityType, ...] = (
    CapabilityType.IMAGE,
    CapabilityType.VIDEO,
    CapabilityType.TEXT,
    CapabilityType.PLUGIN,
    CapabilityType.MUSIC,
)


class CapabilityRegistry:
    """
    Read-only mapping of CapabilityType → CapabilityDefinition.

    Invariants checked at construction:
    1. An IMAGE family exists (it is the fallback for unknown types)
    2. Every family has exactly one default model
    3. Model ids are unique within a family

    Usage:
        registry = default_registry()
        video = registry.get(CapabilityType.VIDEO)
        veo = registry.find_model(CapabilityType.VIDEO, "Veo 3.1")
    """

    def __init__(self, definitions: Mapping[CapabilityType, CapabilityDefinition]) -> None:
        if CapabilityType.IMAGE not in definitions:
            raise CapabilityConfigError("Registry must define the IMAGE family")
        for family, definition in definitions.items():
            _check_family(family, definition)
        self._definitions: Mapping[CapabilityType, CapabilityDefinition] = MappingProxyType(dict(definitions))

    def get(self, capability: CapabilityType | str) -> CapabilityDefinition:
        """Return the family definition; unknown types resolve to IMAGE."""
        try:
            key = CapabilityType(capability)
        except ValueError:
            key = CapabilityType.UNKNOWN
        definition = self._definitions.get(key)
        if definition is None:
            logger.info(f"Capability '{capability}' has no registry family, falling back to IMAGE")
            return self._definitions[CapabilityType.IMAGE]
        return definition

    def has_family(self, capability: CapabilityType) -> bool:
        return capability in self._definitions

    def families(self) -> list[CapabilityType]:
        return list(self._definitions)

    def models(self, capability: CapabilityType | str) -> tuple[ModelConstraint, ...]:
        return self.get(capability).models

    def get_model(self, capability: CapabilityType, model_id: str) -> ModelConstraint | None:
        """Exact-id lookup inside one family (no fallback to IMAGE)."""
        definition = self._definitions.get(capability)
        return definition.get_model(model_id) if definition else None

    def find_model(self, capability: CapabilityType, query: str | None) -> ModelConstraint | None:
        """Id or display-name lookup inside one family (no fallback to IMAGE)."""
        definition = self._definitions.get(capability)
        return definition.find_model(query) if definition else None

    def default_model(self, capability: CapabilityType | str) -> ModelConstraint | None:
        return self.get(capability).default_model()

    def __iter__(self) -> Iterator[CapabilityDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def _check_family(family: CapabilityType, definition: CapabilityDefinition) -> None:
    if family != definition.id:
        raise CapabilityConfigError(f"Family key {family.value} does not match definition id {definition.id.value}")
    if not definition.models:
        raise CapabilityConfigError(f"Family {family.value} has no models")
    defaults = [m.id for m in definition.models if m.is_default]
    if len(defaults) != 1:
        raise CapabilityConfigError(
            f"Family {family.value} must have exactly one default model, found {defaults or 'none'}"
        )
    ids = definition.model_ids()
    if len(set(ids)) != len(ids):
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        raise CapabilityConfigError(f"Family {family.value} has duplicate model ids: {dupes}")


@lru_cache()
def default_registry() -> CapabilityRegistry:
    """Get the cached registry built from the bundled catalog."""
    from canvas_engine.core.capabilities.catalog import CAPABILITY_CATALOG
    return CapabilityRegistry(CAPABILITY_CATALOG)
