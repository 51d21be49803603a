"""
Capability Resolver — AbstractIntent → ResolvedAction.

Pure given ``(intent, context)``: picks a family and model from the
registry, resolves generation parameters, and escalates multi-step requests
to the Instruction Compiler.  A plugin with no resolvable target is an
``ERROR`` action, not an exception.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from canvas_engine.core.capabilities import CapabilityRegistry, ModelConstraint, default_registry
from canvas_engine.core.compiler import InstructionCompiler
from canvas_engine.core.intent_schema.actions import ResolvedAction
from canvas_engine.core.intent_schema.context import ResolverContext
from canvas_engine.core.intent_schema.enums import (
    CONVERSATIONAL_GOALS,
    ActionIntent,
    CapabilityType,
    GoalType,
)
from canvas_engine.core.intent_schema.goals import AbstractIntent, SemanticGoal, parse_abstract_intent
from canvas_engine.core.resolver.parameters import (
    resolve_aspect_ratio,
    resolve_image_count,
    resolve_plugin_target,
    resolve_resolution,
)
from canvas_engine.core.resolver.selection import select_model

logger = logging.getLogger(__name__)

COMPILER_MODEL_ID = "compiler"
ANSWER_MODEL_ID = "standard"

_GENERATE_INTENTS: dict[CapabilityType, ActionIntent] = {
    CapabilityType.IMAGE: ActionIntent.GENERATE_IMAGE,
    CapabilityType.VIDEO: ActionIntent.GENERATE_VIDEO,
    CapabilityType.MUSIC: ActionIntent.GENERATE_MUSIC,
    CapabilityType.TEXT: ActionIntent.CREATE_TEXT,
    CapabilityType.PLUGIN: ActionIntent.GENERATE_PLUGIN,
}

NO_PLUGIN_TARGET = (
    "Please select an image on the canvas (or attach one) so I know what to apply the plugin to."
)


def infer_workflow_goal(intent: AbstractIntent) -> GoalType:
    """Re-infer a goal for a graph-shaped WORKFLOW request from its text alone."""
    text = f"{intent.goal} {intent.prompt or ''}".lower()
    if "music" in text:
        return GoalType.MUSIC_VIDEO
    if "video" in text:
        return GoalType.VIDEO_REQUEST
    return GoalType.UNKNOWN


def normalize_capability(capability: CapabilityType) -> CapabilityType:
    if capability in (CapabilityType.CONNECT, CapabilityType.UNKNOWN):
        return CapabilityType.IMAGE
    return capability


class CapabilityResolver:
    """
    Resolves abstract intents against one capability registry.

    Usage:
        resolver = CapabilityResolver(registry)
        action = resolver.resolve(intent, context)
        if action.is_error: ...
    """

    def __init__(self, registry: CapabilityRegistry | None = None) -> None:
        self.registry = registry or default_registry()
        self.compiler = InstructionCompiler(self.registry)

    def resolve(
        self,
        intent: AbstractIntent | dict[str, Any],
        context: ResolverContext | dict[str, Any] | None = None,
    ) -> ResolvedAction:
        if not isinstance(intent, AbstractIntent):
            intent = parse_abstract_intent(intent)
        if isinstance(context, dict):
            context = ResolverContext.model_validate(context)

        if intent.capability == CapabilityType.WORKFLOW:
            goal_type = infer_workflow_goal(intent)
            logger.warning(f"⚠️ WORKFLOW intent re-inferred as {goal_type.value}; caller graph ignored")
            return self.resolve_goal(intent.to_semantic_goal(goal_type))

        if intent.goal_type is not None:
            if intent.goal_type in CONVERSATIONAL_GOALS:
                return self._answer(intent)
            return self.resolve_goal(intent.to_semantic_goal(intent.goal_type))

        if intent.capability == CapabilityType.TEXT and intent.goal.strip().lower() == "answer":
            return self._answer(intent)

        capability = normalize_capability(intent.capability)
        if not self.registry.has_family(capability):
            logger.info(f"No {capability.value} family in registry, resolving as IMAGE")
            capability = CapabilityType.IMAGE
        model = select_model(intent, capability, self.registry)

        duration = intent.preferences.duration
        if capability == CapabilityType.VIDEO and duration is not None and duration > 0:
            return self.resolve_goal(intent.to_semantic_goal(GoalType.VIDEO_REQUEST, model=model.id))

        if capability == CapabilityType.PLUGIN:
            return self._plugin_action(intent, model, context)

        return ResolvedAction(
            intent=_GENERATE_INTENTS[capability],
            capability=capability,
            model_id=model.id,
            payload=self._generation_payload(intent, capability, model),
            requires_confirmation=False,
            explanation=intent.explanation or f"Using {model.name}",
        )

    def resolve_goal(self, goal: SemanticGoal | dict[str, Any]) -> ResolvedAction:
        """Compile ``goal`` and wrap the plan as an EXECUTE_PLAN action."""
        plan = self.compiler.compile(goal)
        return ResolvedAction(
            intent=ActionIntent.EXECUTE_PLAN,
            capability=CapabilityType.UNKNOWN,
            model_id=COMPILER_MODEL_ID,
            payload=plan,
            requires_confirmation=plan.requires_confirmation,
            explanation=plan.metadata.source_goal.explanation or plan.summary,
        )

    def _answer(self, intent: AbstractIntent) -> ResolvedAction:
        return ResolvedAction(
            intent=ActionIntent.ANSWER,
            capability=CapabilityType.TEXT,
            model_id=ANSWER_MODEL_ID,
            payload={},
            requires_confirmation=False,
            explanation=intent.explanation,
        )

    def _plugin_action(
        self,
        intent: AbstractIntent,
        model: ModelConstraint,
        context: Optional[ResolverContext],
    ) -> ResolvedAction:
        target = resolve_plugin_target(intent, context)
        if target is None:
            logger.info(f"No target for plugin {model.id}")
            return ResolvedAction(
                intent=ActionIntent.ERROR,
                capability=CapabilityType.PLUGIN,
                model_id=model.id,
                payload={"error": f"No target found for {model.name}"},
                requires_confirmation=False,
                explanation=NO_PLUGIN_TARGET,
            )
        payload: dict[str, Any] = {**intent.preferences.extra_params(), "targetId": target}
        if intent.prompt:
            payload["prompt"] = intent.prompt
        return ResolvedAction(
            intent=ActionIntent.GENERATE_PLUGIN,
            capability=CapabilityType.PLUGIN,
            model_id=model.id,
            payload=payload,
            requires_confirmation=False,
            explanation=intent.explanation or f"Running {model.name} on {target}",
        )

    def _generation_payload(
        self,
        intent: AbstractIntent,
        capability: CapabilityType,
        model: ModelConstraint,
    ) -> dict[str, Any]:
        prefs = intent.preferences
        payload: dict[str, Any] = {**prefs.extra_params(), "prompt": intent.prompt or intent.goal}
        if capability in (CapabilityType.IMAGE, CapabilityType.VIDEO):
            payload["aspectRatio"] = resolve_aspect_ratio(model, prefs.aspect_ratio)
            payload["resolution"] = resolve_resolution(model, prefs.resolution)
        if capability == CapabilityType.IMAGE:
            payload["imageCount"] = resolve_image_count(model, prefs.count)
        if prefs.style:
            payload["style"] = prefs.style
        if intent.references:
            payload["referenceIds"] = list(intent.references)
        return payload


def resolve_intent(
    intent: AbstractIntent | dict[str, Any],
    context: ResolverContext | dict[str, Any] | None = None,
    registry: CapabilityRegistry | None = None,
) -> ResolvedAction:
    """Resolve one intent with a throwaway resolver."""
    return CapabilityResolver(registry).resolve(intent, context)
