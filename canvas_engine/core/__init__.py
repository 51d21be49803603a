"""
Canvas Engine Core.

1. INTENT SCHEMA (intent_schema/)
   - Wire contract: AbstractIntent, SemanticGoal, ResolvedAction

2. CAPABILITIES (capabilities/)
   - Read-only model registry and its Markdown formatter

3. RESOLVER (resolver/)
   - Single-action resolution and escalation to the compiler

4. COMPILER (compiler/)
   - Goal-type strategies producing CanvasInstructionPlans

5. PLANNER (planner/)
   - Duration segmentation for long videos
"""
from __future__ import annotations
