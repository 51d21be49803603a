"""
Tests for the intent schema wire models.

Boundary behaviour: graph payloads are discarded, loose enum spellings are
coerced, camelCase is the wire format and parsed values are immutable.
"""
from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from canvas_engine.core.intent_schema import (
    AbstractIntent,
    ActionIntent,
    CapabilityType,
    ContentKind,
    GoalType,
    ResolvedAction,
    SemanticGoal,
    parse_abstract_intent,
    parse_semantic_goal,
)
from canvas_engine.errors import ExitCode, GoalValidationError


class TestAbstractIntent:
    def test_graph_payload_discarded(self, caplog):
        with caplog.at_level(logging.WARNING):
            intent = AbstractIntent.model_validate({
                "capability": "WORKFLOW",
                "goal": "make a video",
                "workflow": {"nodes": []},
                "nodes": [{"id": "n1"}],
                "connections": [],
            })
        assert intent.capability == CapabilityType.WORKFLOW
        assert "discarding caller-supplied graph payload" in caplog.text
        assert "workflow" not in intent.model_dump()

    @pytest.mark.parametrize("raw,expected", [
        ("video", CapabilityType.VIDEO),
        (" Plugin ", CapabilityType.PLUGIN),
        ("hologram", CapabilityType.UNKNOWN),
        (None, CapabilityType.UNKNOWN),
    ])
    def test_capability_coercion(self, raw, expected):
        assert AbstractIntent(capability=raw).capability == expected

    def test_unknown_goal_type(self):
        assert AbstractIntent(goal_type="make_magic").goal_type == GoalType.UNKNOWN

    def test_needs_aliases_and_dedupe(self):
        intent = AbstractIntent(needs=["music", "Image", "bogus", "image", "song"])
        assert intent.needs == [ContentKind.AUDIO, ContentKind.IMAGE]

    def test_empty_references_dropped(self):
        assert AbstractIntent(references=["a", "", None, "b"]).references == ["a", "b"]

    def test_extra_preferences_kept(self):
        intent = AbstractIntent.model_validate({"preferences": {"pluginType": "upscale", "scale": 2, "style": "noir"}})
        assert intent.preferences.style == "noir"
        assert intent.preferences.extra_params() == {"pluginType": "upscale", "scale": 2}

    def test_frozen(self):
        intent = AbstractIntent(goal="generate")
        with pytest.raises(ValidationError):
            intent.goal = "answer"  # type: ignore[misc]

    def test_to_semantic_goal(self):
        intent = AbstractIntent.model_validate({
            "capability": "PLUGIN",
            "goal": "remove background",
            "references": ["img-1"],
            "preferences": {"duration": 12, "aspectRatio": "9:16", "preferredModel": "veo", "pluginType": "remove-bg"},
            "explanation": "why",
        })
        goal = intent.to_semantic_goal(GoalType.PLUGIN_ACTION)
        assert goal.goal_type == GoalType.PLUGIN_ACTION
        assert goal.topic == "remove background"
        assert goal.plugin_type == "remove-bg"
        assert goal.duration_seconds == 12
        assert goal.aspect_ratio == "9:16"
        assert goal.model == "veo"
        assert goal.references == ["img-1"]
        assert goal.explanation == "why"

    def test_to_semantic_goal_overrides(self):
        goal = AbstractIntent(prompt="a storm").to_semantic_goal(GoalType.VIDEO_REQUEST, model="veo-3.1")
        assert (goal.topic, goal.model, goal.raw_input) == ("a storm", "veo-3.1", "a storm")


class TestSemanticGoal:
    def test_camel_case_wire_format(self):
        goal = SemanticGoal.model_validate({"goalType": "story_video", "durationSeconds": 20, "aspectRatio": "16:9"})
        assert goal.goal_type == GoalType.STORY_VIDEO
        data = goal.model_dump(by_alias=True)
        assert data["durationSeconds"] == 20
        assert data["aspectRatio"] == "16:9"

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_values_cleared(self, value):
        goal = SemanticGoal(duration_seconds=value, count=value)
        assert goal.duration_seconds is None
        assert goal.count is None

    def test_steps_discarded(self):
        goal = SemanticGoal.model_validate({"goalType": "CLARIFY", "steps": [{"action": "DELETE_NODE"}]})
        assert goal.goal_type == GoalType.CLARIFY

    def test_text_joins_topic_and_raw_input(self):
        assert SemanticGoal(topic="foxes", raw_input="delete the foxes").text == "foxes delete the foxes"
        assert SemanticGoal().text == ""


class TestParsers:
    def test_parse_semantic_goal(self):
        goal = parse_semantic_goal({"goalType": "IMAGE_GENERATION", "topic": "a fox", "count": 2})
        assert goal.count == 2

    def test_invalid_goal_raises_readable_errors(self):
        with pytest.raises(GoalValidationError) as exc_info:
            parse_semantic_goal({"goalType": "IMAGE_GENERATION", "durationSeconds": "forever"})
        assert exc_info.value.errors
        assert exc_info.value.exit_code == ExitCode.USER_ERROR

    def test_require_explanation(self):
        with pytest.raises(GoalValidationError, match="explanation"):
            parse_semantic_goal({"goalType": "CLARIFY", "explanation": "  "}, require_explanation=True)
        goal = parse_semantic_goal({"goalType": "CLARIFY", "explanation": "ok"}, require_explanation=True)
        assert goal.explanation == "ok"

    def test_parse_abstract_intent_invalid(self):
        with pytest.raises(GoalValidationError):
            parse_abstract_intent({"references": "not-a-list"})


class TestResolvedAction:
    def test_dict_payload(self):
        action = ResolvedAction(
            intent=ActionIntent.GENERATE_IMAGE, capability=CapabilityType.IMAGE, model_id="m", payload={"prompt": "x"},
        )
        assert action.plan is None
        assert not action.is_error
        assert action.model_dump(by_alias=True)["modelId"] == "m"

    def test_defaults(self):
        action = ResolvedAction(intent=ActionIntent.ANSWER, capability=CapabilityType.TEXT, model_id="standard")
        assert action.payload == {}
        assert action.requires_confirmation is False
