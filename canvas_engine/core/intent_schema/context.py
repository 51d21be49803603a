"""Read-only canvas snapshot used for plugin target fallback.

Only the fields the resolver reads are modelled; anything else the canvas
sends is ignored.
"""

from __future__ import annotations

from pydantic import Field

from canvas_engine.models.base import FrozenCamelModel


class CanvasSelection(FrozenCamelModel):
    selected_image_modal_ids: list[str] = Field(default_factory=list)
    selected_video_modal_ids: list[str] = Field(default_factory=list)
    selected_rich_text_ids: list[str] = Field(default_factory=list)
    selected_image_ids: list[str] = Field(default_factory=list)
    selected_image_indices: list[int] = Field(
        default_factory=list, description="Positions in canvasState.images for uploads without an element id"
    )


class CanvasNodeRef(FrozenCamelModel):
    id: str


class CanvasImageRef(FrozenCamelModel):
    element_id: str | None = None
    url: str | None = None


class CanvasStateSnapshot(FrozenCamelModel):
    image_modal_states: list[CanvasNodeRef] = Field(
        default_factory=list, description="Image generator nodes in creation order"
    )
    images: list[CanvasImageRef] = Field(default_factory=list)


class ResolverContext(FrozenCamelModel):
    canvas_selection: CanvasSelection | None = None
    canvas_state: CanvasStateSnapshot | None = None
