"""DELETE_CONTENT: remove nodes by id, by kind, or clear the canvas."""

from __future__ import annotations

from canvas_engine.core.compiler.context import CompileContext, new_step_id
from canvas_engine.core.compiler.keywords import find_content_kinds, find_plugin_types, mentions_everything
from canvas_engine.core.intent_schema.plan import DeleteNodeStep

CLARIFY_DELETE = (
    "🤔 I couldn't tell what to delete. Please be specific, for example "
    "\"delete all videos\" or \"remove the upscaler\", or select the items first."
)


def compile_delete_content(ctx: CompileContext) -> str:
    goal = ctx.goal

    if goal.references:
        ctx.add(DeleteNodeStep(
            id=new_step_id(),
            target_type="all",
            target_ids=list(goal.references),
            explanation=f"Delete {len(goal.references)} selected item(s)",
        ))
        return f"🗑️ Delete {len(goal.references)} selected item(s)"

    # Plugin phrases go first so "video editor" is not read as "video".
    plugins, remaining = find_plugin_types(goal.text)
    kinds = find_content_kinds(remaining, goal.needs)

    for kind in kinds:
        ctx.add(DeleteNodeStep(id=new_step_id(), target_type=kind, explanation=f"Delete all {kind} nodes"))
    for plugin in plugins:
        ctx.add(DeleteNodeStep(
            id=new_step_id(),
            target_type="plugin",
            plugin_type=plugin,
            explanation=f"Delete all {plugin} plugins",
        ))

    if ctx.steps:
        return "🗑️ Delete: " + ", ".join(kinds + plugins)
    if mentions_everything(remaining):
        ctx.add(DeleteNodeStep(id=new_step_id(), target_type="all", explanation="Clear the canvas"))
        return "🗑️ Clear everything on the canvas"
    return CLARIFY_DELETE
