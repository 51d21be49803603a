"""Video Planner: segment long video requests into per-call nodes."""
from __future__ import annotations

from canvas_engine.core.planner.video import (
    VideoPlan,
    VideoPlanDict,
    VideoPlanRequest,
    plan_video_execution,
    split_duration,
)

__all__ = [
    "VideoPlan",
    "VideoPlanDict",
    "VideoPlanRequest",
    "plan_video_execution",
    "split_duration",
]
