"""
Instruction Compiler package.

Public API:
    compile_goal_to_plan(goal, registry=None) -> CanvasInstructionPlan
    InstructionCompiler(registry).compile(goal)
    normalize_model_name(raw, registry=None, capability=None) -> model id | None
    clamp_duration(model, requested, default) -> int
    validate_plan(plan) -> PlanValidationResult
"""
from __future__ import annotations

from canvas_engine.core.compiler.compiler import InstructionCompiler, compile_goal_to_plan
from canvas_engine.core.compiler.durations import clamp_duration, nearest_valid_duration, normalize_resolution
from canvas_engine.core.compiler.keywords import canonical_plugin_type, find_content_kinds, find_plugin_types
from canvas_engine.core.compiler.normalization import MODEL_ALIASES, compact_model_key, normalize_model_name
from canvas_engine.core.compiler.strategies import STRATEGIES
from canvas_engine.core.compiler.validation import PlanValidationResult, validate_plan

__all__ = [
    "InstructionCompiler",
    "compile_goal_to_plan",
    "clamp_duration",
    "nearest_valid_duration",
    "normalize_resolution",
    "canonical_plugin_type",
    "find_content_kinds",
    "find_plugin_types",
    "MODEL_ALIASES",
    "compact_model_key",
    "normalize_model_name",
    "STRATEGIES",
    "PlanValidationResult",
    "validate_plan",
]
