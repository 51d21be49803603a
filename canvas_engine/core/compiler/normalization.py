"""Model-name normalization.

Upstream callers spell model names loosely ("veo3.1 fast", "Veo 3.1 Fast",
"veo-3.1-fast").  Everything is compacted to a lowercase key with separators
removed, then looked up in an explicit alias table before falling back to the
registry's own ids and display names.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from canvas_engine.core.capabilities import CapabilityRegistry, default_registry
from canvas_engine.core.intent_schema.enums import CapabilityType

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s._\-/]+")

# Compact key → canonical model id.  Only spellings the registry lookup
# cannot reach on its own belong here.
MODEL_ALIASES: dict[str, str] = {
    # Veo
    "veo": "veo-3.1",
    "veo3": "veo-3.1",
    "veo31": "veo-3.1",
    "googleveo": "veo-3.1",
    "googleveo31": "veo-3.1",
    "veofast": "veo-3.1-fast",
    "veo3fast": "veo-3.1-fast",
    "veo31fast": "veo-3.1-fast",
    "fastveo": "veo-3.1-fast",
    "googleveo31fast": "veo-3.1-fast",
    # Seedance
    "seedance": "seedance-1.0-pro",
    "seedancepro": "seedance-1.0-pro",
    "seedance1pro": "seedance-1.0-pro",
    "seedancelite": "seedance-1.0-lite",
    "seedance1lite": "seedance-1.0-lite",
    # Other video
    "sora": "sora-2-pro",
    "sora2": "sora-2-pro",
    "kling": "kling-2.5-turbo-pro",
    "kling25": "kling-2.5-turbo-pro",
    "pixverse": "pixverse-v5",
    "ltx": "ltx-v2-pro",
    "ltxpro": "ltx-v2-pro",
    "ltxfast": "ltx-v2-fast",
    "wan": "wan-2.5",
    "wan25": "wan-2.5",
    "hailuo": "minimax-hailuo-02",
    "minimax": "minimax-hailuo-02",
    # Image
    "nanobanana": "google-nano-banana",
    "nanobananapro": "google-nano-banana-pro",
    "zimage": "z-image-turbo",
    "zturbo": "z-image-turbo",
    "midjourney": "midjourney-v6",
    "imagen": "imagen-4",
    "seedream": "seedream-v4",
    # Music
    "udio": "udio-v2",
    "suno": "suno-v3.5",
}


def compact_model_key(raw: str) -> str:
    """Lowercase ``raw`` and strip whitespace, dots, dashes and underscores."""
    return _SEPARATORS.sub("", raw.strip().lower())


def normalize_model_name(
    raw: Optional[str],
    registry: CapabilityRegistry | None = None,
    capability: CapabilityType | None = None,
) -> Optional[str]:
    """
    Map a free-text model name to a canonical registry id.

    Args:
        raw: Name as the caller wrote it
        registry: Registry to resolve against (bundled catalog by default)
        capability: Restrict matches to one family

    Returns:
        The model id, or None when nothing matches
    """
    if not raw or not raw.strip():
        return None
    registry = registry or default_registry()
    families = [capability] if capability else registry.families()
    key = compact_model_key(raw)

    def _in_scope(model_id: str) -> bool:
        return any(registry.get_model(f, model_id) is not None for f in families if registry.has_family(f))

    alias = MODEL_ALIASES.get(key)
    if alias and _in_scope(alias):
        return alias

    for family in families:
        if not registry.has_family(family):
            continue
        for model in registry.models(family):
            if key in (compact_model_key(model.id), compact_model_key(model.name)):
                return model.id

    logger.debug(f"No model matches '{raw}'")
    return None
