"""Keyword tables for reading plugin and content kinds out of free text."""

from __future__ import annotations

import re
from typing import Iterable

from canvas_engine.core.intent_schema.enums import ContentKind

# Canonical plugin type → phrases that name it (longest phrases first within a row).
PLUGIN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "remove-bg": ("background remover", "remove background", "background removal", "remove-bg", "remove bg",
                  "removebg", "bg remover"),
    "upscale": ("upscaler", "upscale", "enhance resolution", "super resolution"),
    "erase": ("erase / replace", "erase-replace", "eraser", "erase"),
    "expand": ("expand image", "outpaint", "expand"),
    "vectorize": ("vectorize", "vectorise", "vector", "svg"),
    "next-scene": ("next scene", "next-scene"),
    "storyboard": ("storyboard generator", "storyboard"),
    "multiangle": ("multiangle camera", "multi-angle", "multi angle", "multiangle"),
    "video-editor": ("video editor", "video-editor"),
    "image-editor": ("image editor", "image-editor"),
    "compare": ("compare models", "compare"),
}

# Canonical plugin type → PLUGIN registry model id (editors are canvas tools, not models).
PLUGIN_MODEL_IDS: dict[str, str] = {
    "remove-bg": "remove-bg",
    "upscale": "upscale",
    "erase": "erase-replace",
    "expand": "expand-image",
    "vectorize": "vectorize-image",
    "next-scene": "next-scene",
    "storyboard": "storyboard-generator",
    "multiangle": "multiangle-camera",
    "compare": "compare-image-models",
}

# Delete target type → words that name that kind of node.
CONTENT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "image": ("image", "images", "picture", "pictures", "photo", "photos", "img"),
    "video": ("video", "videos", "clip", "clips"),
    "text": ("text", "texts", "script", "scripts", "note", "notes"),
    "music": ("music", "song", "songs", "audio", "track", "tracks"),
}

_NEEDS_TO_TARGET: dict[ContentKind, str] = {
    ContentKind.IMAGE: "image",
    ContentKind.VIDEO: "video",
    ContentKind.TEXT: "text",
    ContentKind.AUDIO: "music",
}

_CATCH_ALL = re.compile(r"\b(all|everything|canvas)\b")


def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    return re.compile(r"(?<![a-z0-9])" + re.escape(phrase) + r"(?![a-z0-9])")


_PLUGIN_PATTERNS: dict[str, list[re.Pattern[str]]] = {
    plugin: [_phrase_pattern(p) for p in phrases] for plugin, phrases in PLUGIN_KEYWORDS.items()
}
_CONTENT_PATTERNS: dict[str, list[re.Pattern[str]]] = {
    kind: [_phrase_pattern(w) for w in words] for kind, words in CONTENT_KEYWORDS.items()
}


def find_plugin_types(text: str | None) -> tuple[list[str], str]:
    """Return the plugin types named in ``text`` and the text with those phrases removed."""
    if not text:
        return [], ""
    remaining = text.lower()
    found: list[str] = []
    for plugin, patterns in _PLUGIN_PATTERNS.items():
        for pattern in patterns:
            if pattern.search(remaining):
                if plugin not in found:
                    found.append(plugin)
                remaining = pattern.sub(" ", remaining)
    return found, remaining


def canonical_plugin_type(raw: str | None) -> str | None:
    """Map a plugin name or phrase to its canonical type ("Remove Background" → "remove-bg")."""
    if not raw:
        return None
    lowered = raw.strip().lower()
    if lowered in PLUGIN_KEYWORDS:
        return lowered
    for plugin_type, model_id in PLUGIN_MODEL_IDS.items():
        if lowered == model_id:
            return plugin_type
    found, _ = find_plugin_types(lowered)
    return found[0] if found else None


def find_content_kinds(text: str | None, needs: Iterable[ContentKind] = ()) -> list[str]:
    """Delete target types named by ``text`` or implied by ``needs``, in table order."""
    lowered = (text or "").lower()
    named = {kind for kind, patterns in _CONTENT_PATTERNS.items() if any(p.search(lowered) for p in patterns)}
    named.update(_NEEDS_TO_TARGET[n] for n in needs if n in _NEEDS_TO_TARGET)
    return [kind for kind in CONTENT_KEYWORDS if kind in named]


def mentions_everything(text: str | None) -> bool:
    return bool(text) and bool(_CATCH_ALL.search(text.lower()))
