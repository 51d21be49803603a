"""
CanvasInstructionPlan — the wire contract between compiler and executor.

A plan is a DAG written as a topologically sorted list: every step that names
another step (``inputFrom``, ``fromStepId``/``toStepId``, ``stepIds``) must name
one that appears earlier in ``steps``.  The model enforces this on construction.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, model_validator

from canvas_engine.core.intent_schema.goals import SemanticGoal
from canvas_engine.models.base import FrozenCamelModel

NodeType = Literal["image-generator", "video-generator", "text", "music-generator", "plugin"]
"""Canvas node kinds the executor knows how to create."""

GroupType = Literal["video-sequence", "story-board", "logical-group"]

DeleteTargetType = Literal["image", "video", "text", "music", "plugin", "all"]


class PlanStep(FrozenCamelModel):
    """Fields common to every step."""

    id: str
    explanation: str | None = Field(default=None, description="Human-readable preview text")

    def referenced_step_ids(self) -> list[str]:
        return []


class CreateNodeStep(PlanStep):
    """Create ``count`` nodes of one type from a shared config template.

    ``batch_configs`` optionally overrides the template per node (index-aligned).
    """

    action: Literal["CREATE_NODE"] = "CREATE_NODE"
    node_type: NodeType
    count: int = Field(default=1, ge=1)
    config_template: dict[str, Any] = Field(default_factory=dict)
    batch_configs: list[dict[str, Any]] | None = None
    input_from: str | None = None

    def referenced_step_ids(self) -> list[str]:
        return [self.input_from] if self.input_from else []


class ConnectSequentiallyStep(PlanStep):
    """Wire the nodes of ``from_step_id`` to ``to_step_id`` positionally.

    With no ``to_step_id`` the nodes of ``from_step_id`` are chained n → n+1.
    """

    action: Literal["CONNECT_SEQUENTIALLY"] = "CONNECT_SEQUENTIALLY"
    from_step_id: str
    to_step_id: str | None = None

    def referenced_step_ids(self) -> list[str]:
        return [self.from_step_id] + ([self.to_step_id] if self.to_step_id else [])


class GroupNodesStep(PlanStep):
    action: Literal["GROUP_NODES"] = "GROUP_NODES"
    step_ids: list[str] = Field(..., min_length=1)
    group_type: GroupType
    label: str

    def referenced_step_ids(self) -> list[str]:
        return list(self.step_ids)


class DeleteNodeStep(PlanStep):
    """Delete nodes by type; ``target_ids`` narrows to ids, ``plugin_type`` to a plugin kind."""

    action: Literal["DELETE_NODE"] = "DELETE_NODE"
    target_type: DeleteTargetType
    target_ids: list[str] | None = None
    plugin_type: str | None = None


CanvasInstructionStep = Annotated[
    Union[CreateNodeStep, ConnectSequentiallyStep, GroupNodesStep, DeleteNodeStep],
    Field(discriminator="action"),
]


def step_reference_errors(steps: list[CreateNodeStep | ConnectSequentiallyStep | GroupNodesStep | DeleteNodeStep]) -> list[str]:
    """Return one message per duplicate id or non-backward step reference."""
    errors: list[str] = []
    seen: set[str] = set()
    for index, step in enumerate(steps):
        for ref in step.referenced_step_ids():
            if ref == step.id:
                errors.append(f"steps[{index}] ({step.action}) references itself")
            elif ref not in seen:
                errors.append(f"steps[{index}] ({step.action}) references '{ref}' which is not an earlier step")
        if step.id in seen:
            errors.append(f"steps[{index}] reuses step id '{step.id}'")
        seen.add(step.id)
    return errors


class PlanMetadata(FrozenCamelModel):
    source_goal: SemanticGoal
    compiled_at: int = Field(..., description="Unix epoch milliseconds")


class CanvasInstructionPlan(FrozenCamelModel):
    """Ordered, dependency-checked steps produced by one compiler strategy."""

    id: str
    summary: str
    steps: list[CanvasInstructionStep] = Field(default_factory=list)
    metadata: PlanMetadata
    requires_confirmation: bool = True

    @model_validator(mode="after")
    def validate_step_order(self) -> "CanvasInstructionPlan":
        errors = step_reference_errors(self.steps)
        if errors:
            raise ValueError("; ".join(errors))
        return self

    def is_empty(self) -> bool:
        return not self.steps

    def step_actions(self) -> list[str]:
        return [s.action for s in self.steps]

    def get_step(self, step_id: str) -> CreateNodeStep | ConnectSequentiallyStep | GroupNodesStep | DeleteNodeStep | None:
        for step in self.steps:
            if step.id == step_id:
                return step
        return None

    def create_steps(self, node_type: NodeType | None = None) -> list[CreateNodeStep]:
        return [
            s for s in self.steps
            if isinstance(s, CreateNodeStep) and (node_type is None or s.node_type == node_type)
        ]
