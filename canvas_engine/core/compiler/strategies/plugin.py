"""PLUGIN_ACTION: run one plugin against the referenced canvas items."""

from __future__ import annotations

import logging

from canvas_engine.core.compiler.context import CompileContext, model_fields, new_step_id
from canvas_engine.core.compiler.keywords import PLUGIN_MODEL_IDS, canonical_plugin_type
from canvas_engine.core.intent_schema.enums import CapabilityType
from canvas_engine.core.intent_schema.plan import CreateNodeStep

logger = logging.getLogger(__name__)


def _plugin_type(ctx: CompileContext) -> str:
    goal = ctx.goal
    plugin_type = (
        canonical_plugin_type(goal.plugin_type)
        or canonical_plugin_type(goal.model)
        or canonical_plugin_type(goal.text)
    )
    if plugin_type:
        return plugin_type
    if goal.plugin_type:
        return goal.plugin_type.strip().lower()
    default = ctx.registry.default_model(CapabilityType.PLUGIN)
    logger.info(f"No plugin named in goal; using default plugin '{default.id}'")
    return canonical_plugin_type(default.id) or default.id


def compile_plugin_action(ctx: CompileContext) -> str:
    goal = ctx.goal
    plugin_type = _plugin_type(ctx)
    # An exact registry id ("topaz-upscaler") wins over the canonical type's model.
    model = ctx.registry.get_model(CapabilityType.PLUGIN, goal.plugin_type.strip()) if goal.plugin_type else None
    if model is None:
        model = ctx.registry.get_model(CapabilityType.PLUGIN, PLUGIN_MODEL_IDS.get(plugin_type, plugin_type))

    config: dict = {"pluginType": plugin_type, "targetIds": list(goal.references)}
    if model is not None:
        config.update(model_fields(model))
    if goal.topic:
        config["prompt"] = goal.topic

    ctx.add(CreateNodeStep(
        id=new_step_id(),
        node_type="plugin",
        count=1,
        config_template=config,
        explanation=f"Run {model.name if model else plugin_type}",
    ))

    target = ", ".join(goal.references) if goal.references else "the current selection"
    return f"🧩 {model.name if model else plugin_type} on {target}"
