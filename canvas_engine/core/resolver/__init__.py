"""
Capability Resolver package.

Public API:
    resolve_intent(intent, context=None, registry=None) -> ResolvedAction
    CapabilityResolver(registry).resolve(intent, context)
    CapabilityResolver(registry).resolve_goal(goal)
"""
from __future__ import annotations

from canvas_engine.core.resolver.parameters import (
    resolve_aspect_ratio,
    resolve_image_count,
    resolve_plugin_target,
    resolve_resolution,
)
from canvas_engine.core.resolver.resolve import (
    CapabilityResolver,
    infer_workflow_goal,
    normalize_capability,
    resolve_intent,
)
from canvas_engine.core.resolver.selection import select_model

__all__ = [
    "CapabilityResolver",
    "resolve_intent",
    "infer_workflow_goal",
    "normalize_capability",
    "select_model",
    "resolve_aspect_ratio",
    "resolve_image_count",
    "resolve_plugin_target",
    "resolve_resolution",
]
