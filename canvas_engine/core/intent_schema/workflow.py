"""Plan-level node and wire artifacts emitted by the Video Planner.

These carry string ids only; the executor materialises them as canvas elements.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.models.base import FrozenCamelModel


class Position(FrozenCamelModel):
    x: float = 0.0
    y: float = 0.0


class WorkflowNode(FrozenCamelModel):
    id: str
    capability: CapabilityType
    model: str
    position: Position
    params: dict[str, Any] = Field(default_factory=dict)
    label: str | None = None


class WorkflowConnection(FrozenCamelModel):
    id: str
    from_node_id: str
    to_node_id: str
