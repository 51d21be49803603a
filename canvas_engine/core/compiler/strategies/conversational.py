"""Goal types that produce no canvas steps."""

from __future__ import annotations

from canvas_engine.core.compiler.context import CompileContext

UNKNOWN_GOAL = (
    "🤔 I couldn't map this request to a canvas action. Try asking for an image, "
    "a video, music, or a plugin such as upscale or remove background."
)


def compile_conversational(ctx: CompileContext) -> str:
    return ctx.goal.explanation or "No canvas changes needed."


def compile_unknown(ctx: CompileContext) -> str:
    return UNKNOWN_GOAL
