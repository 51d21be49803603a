"""Shared pydantic base models for the canvas engine wire format."""
from __future__ import annotations

from canvas_engine.models.base import CamelModel, FrozenCamelModel, to_camel

__all__ = ["CamelModel", "FrozenCamelModel", "to_camel"]
