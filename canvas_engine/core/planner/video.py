"""
Video Planner — split a target duration into model-sized segments.

A model can only render ``temporal.max_output_seconds`` per call.  Longer
requests become a left-to-right row of segment nodes chained with
sequential connections; only the final segment may be shorter than the
per-call maximum.
"""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass, field
from typing import Any

from pydantic import Field
from typing_extensions import TypedDict

from canvas_engine.config import get_settings
from canvas_engine.core.capabilities import CapabilityRegistry, default_registry
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.workflow import Position, WorkflowConnection, WorkflowNode
from canvas_engine.errors import MissingTemporalEnvelopeError, UnknownModelError
from canvas_engine.models.base import FrozenCamelModel

logger = logging.getLogger(__name__)


class VideoPlanDict(TypedDict):
    """JSON shape of a VideoPlan: camelCase nodes and connections."""

    nodes: list[dict[str, Any]]
    connections: list[dict[str, Any]]


class VideoPlanRequest(FrozenCamelModel):
    duration: float = Field(..., gt=0, description="Total seconds to produce")
    model_id: str
    prompt: str = ""
    aspect_ratio: str = "16:9"
    base_position: Position = Field(default_factory=Position)


@dataclass
class VideoPlan:
    """Nodes in playback order plus the wires chaining them."""
    nodes: list[WorkflowNode] = field(default_factory=list)
    connections: list[WorkflowConnection] = field(default_factory=list)

    @property
    def segment_durations(self) -> list[float]:
        return [n.params["duration"] for n in self.nodes]

    def to_dict(self) -> VideoPlanDict:
        return {
            "nodes": [n.model_dump(by_alias=True) for n in self.nodes],
            "connections": [c.model_dump(by_alias=True) for c in self.connections],
        }


def split_duration(total: float, max_segment: float) -> list[float]:
    """
    Split ``total`` seconds into ``ceil(total / max_segment)`` segments.

    Every segment is ``max_segment`` long except possibly the last, and the
    segments sum to ``total`` exactly.

    >>> split_duration(20, 8)
    [8, 8, 4]
    """
    if total <= 0 or max_segment <= 0:
        raise ValueError(f"Durations must be positive (total={total}, max_segment={max_segment})")
    count = math.ceil(total / max_segment)
    return [min(total - i * max_segment, max_segment) for i in range(count)]


def plan_video_execution(
    request: VideoPlanRequest | dict,
    registry: CapabilityRegistry | None = None,
) -> VideoPlan:
    """
    Build the segment nodes and connections for one video request.

    Raises:
        UnknownModelError: ``model_id`` is not a VIDEO model in the registry
        MissingTemporalEnvelopeError: the model has no ``temporal`` limits
    """
    if isinstance(request, dict):
        request = VideoPlanRequest.model_validate(request)
    registry = registry or default_registry()

    model = registry.get_model(CapabilityType.VIDEO, request.model_id)
    if model is None:
        raise UnknownModelError(request.model_id, CapabilityType.VIDEO.value)
    if model.temporal is None:
        raise MissingTemporalEnvelopeError(model.id)

    max_output = model.temporal.max_output_seconds
    if not model.temporal.stitchable and request.duration > max_output:
        logger.warning(
            f"⚠️ {model.name} is not stitchable but {request.duration}s was requested "
            f"(max {max_output}s per call); segments will not join seamlessly"
        )

    spacing = get_settings().video_node_spacing
    resolution = model.resolutions[0] if model.resolutions else None
    plan = VideoPlan()
    previous_id: str | None = None

    for i, seconds in enumerate(split_duration(request.duration, max_output)):
        node_id = f"video-node-{uuid.uuid4()}"
        plan.nodes.append(WorkflowNode(
            id=node_id,
            capability=CapabilityType.VIDEO,
            model=model.name,
            position=Position(x=request.base_position.x + i * spacing, y=request.base_position.y),
            params={
                "prompt": request.prompt + (" (continuation)" if i > 0 else ""),
                "aspectRatio": request.aspect_ratio,
                "duration": seconds,
                "resolution": resolution,
            },
            label=f"Segment {i + 1}",
        ))
        if previous_id is not None:
            plan.connections.append(WorkflowConnection(
                id=f"conn-{uuid.uuid4()}",
                from_node_id=previous_id,
                to_node_id=node_id,
            ))
        previous_id = node_id

    logger.debug(f"Planned {len(plan.nodes)} segment(s) for {request.duration}s on {model.id}")
    return plan
