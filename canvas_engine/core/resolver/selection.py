"""Deterministic model selection within one capability family."""

from __future__ import annotations

import logging

from canvas_engine.core.capabilities import CapabilityDefinition, CapabilityRegistry, ModelConstraint
from canvas_engine.core.compiler.keywords import PLUGIN_MODEL_IDS, canonical_plugin_type
from canvas_engine.core.compiler.normalization import normalize_model_name
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.goals import AbstractIntent

logger = logging.getLogger(__name__)


def _named_model(
    definition: CapabilityDefinition,
    registry: CapabilityRegistry,
    query: str | None,
) -> ModelConstraint | None:
    if not query:
        return None
    model = definition.find_model(query)
    if model is not None:
        return model
    model_id = normalize_model_name(query, registry, definition.id)
    return definition.get_model(model_id) if model_id else None


def _plugin_hint(definition: CapabilityDefinition, goal: str) -> ModelConstraint | None:
    plugin_type = canonical_plugin_type(goal)
    if plugin_type is None:
        return None
    return definition.get_model(PLUGIN_MODEL_IDS.get(plugin_type, plugin_type))


def select_model(
    intent: AbstractIntent,
    capability: CapabilityType,
    registry: CapabilityRegistry,
) -> ModelConstraint:
    """
    Pick a model for ``intent`` in strict priority order:

    1. ``preferences.preferredModel`` (exact id, then display-name substring)
    2. For PLUGIN, the plugin named by ``intent.goal``
    3. With references: first content-to-content model, else the default
    4. Without references: the family default
    5. The first model in the family
    """
    definition = registry.get(capability)

    preferred = intent.preferences.preferred_model
    model = _named_model(definition, registry, preferred)
    if model is not None:
        return model
    if preferred:
        logger.info(f"Preferred model '{preferred}' not found in {definition.id.value}; falling back")

    if definition.id == CapabilityType.PLUGIN and intent.goal:
        model = _named_model(definition, registry, intent.goal) or _plugin_hint(definition, intent.goal)
        if model is not None:
            return model

    if intent.references:
        model = next((m for m in definition.models if m.supports.content_to_content), None)
        if model is not None:
            return model

    return definition.default_model() or definition.models[0]
