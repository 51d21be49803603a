"""Tests for the ``canvas-engine`` CLI.

All tests use ``typer.testing.CliRunner`` against the full app.  JSON is
parsed from stdout only; errors are reported on stderr with an exit code
from :class:`canvas_engine.errors.ExitCode`.
"""
from __future__ import annotations

import json
import pathlib

import pytest
from typer.testing import CliRunner

from canvas_engine.cli import cli
from canvas_engine.errors import ExitCode

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers / fixtures
# ---------------------------------------------------------------------------


def _write(tmp_path: pathlib.Path, name: str, data: object) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.fixture
def story_goal(tmp_path: pathlib.Path) -> str:
    return _write(tmp_path, "goal.json", {
        "goalType": "STORY_VIDEO",
        "topic": "a robot uprising",
        "durationSeconds": 20,
        "aspectRatio": "16:9",
        "explanation": "A short story video",
    })


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompile:
    def test_compile_file(self, story_goal):
        result = runner.invoke(cli, ["compile", story_goal])
        assert result.exit_code == ExitCode.SUCCESS, result.output
        plan = json.loads(result.stdout)
        assert len(plan["steps"]) == 5
        assert plan["requiresConfirmation"] is True
        assert plan["steps"][1]["count"] == 3

    def test_compile_stdin(self):
        result = runner.invoke(cli, ["compile", "-"], input=json.dumps({"goalType": "CLARIFY"}))
        assert result.exit_code == ExitCode.SUCCESS, result.output
        assert json.loads(result.stdout)["steps"] == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["compile", str(path)])
        assert result.exit_code == ExitCode.USER_ERROR

    def test_not_an_object(self, tmp_path):
        result = runner.invoke(cli, ["compile", _write(tmp_path, "list.json", [1, 2])])
        assert result.exit_code == ExitCode.USER_ERROR

    def test_missing_file(self, tmp_path):
        result = runner.invoke(cli, ["compile", str(tmp_path / "nope.json")])
        assert result.exit_code == ExitCode.USER_ERROR

    def test_require_explanation(self, tmp_path):
        path = _write(tmp_path, "goal.json", {"goalType": "CLARIFY"})
        result = runner.invoke(cli, ["compile", path, "--require-explanation"])
        assert result.exit_code == ExitCode.USER_ERROR


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_plugin_without_target(self, tmp_path):
        path = _write(tmp_path, "intent.json", {"capability": "PLUGIN", "goal": "upscale"})
        result = runner.invoke(cli, ["resolve", path])
        assert result.exit_code == ExitCode.SUCCESS, result.output
        action = json.loads(result.stdout)
        assert action["intent"] == "ERROR"
        assert action["requiresConfirmation"] is False

    def test_plugin_with_context(self, tmp_path):
        intent = _write(tmp_path, "intent.json", {"capability": "PLUGIN", "goal": "upscale"})
        context = _write(tmp_path, "ctx.json", {"canvasSelection": {"selectedImageModalIds": ["modal-1"]}})
        result = runner.invoke(cli, ["resolve", intent, "--context", context])
        assert result.exit_code == ExitCode.SUCCESS, result.output
        action = json.loads(result.stdout)
        assert action["intent"] == "GENERATE_PLUGIN"
        assert action["payload"]["targetId"] == "modal-1"

    def test_escalated_plan_is_embedded(self, tmp_path):
        path = _write(tmp_path, "intent.json", {"capability": "VIDEO", "preferences": {"duration": 20}})
        result = runner.invoke(cli, ["resolve", path])
        action = json.loads(result.stdout)
        assert action["intent"] == "EXECUTE_PLAN"
        assert action["modelId"] == "compiler"
        assert action["payload"]["steps"][0]["nodeType"] == "video-generator"


# ---------------------------------------------------------------------------
# plan-video
# ---------------------------------------------------------------------------


class TestPlanVideo:
    def test_segments(self):
        result = runner.invoke(cli, ["plan-video", "--model", "veo-3.1", "--duration", "20", "--x", "10"])
        assert result.exit_code == ExitCode.SUCCESS, result.output
        plan = json.loads(result.stdout)
        assert [n["params"]["duration"] for n in plan["nodes"]] == [8, 8, 4]
        assert [n["position"]["x"] for n in plan["nodes"]] == [10, 460, 910]
        assert len(plan["connections"]) == 2

    def test_unknown_model_is_config_error(self):
        result = runner.invoke(cli, ["plan-video", "--model", "nope", "--duration", "10"])
        assert result.exit_code == ExitCode.CONFIG_ERROR

    def test_non_positive_duration(self):
        result = runner.invoke(cli, ["plan-video", "--model", "veo-3.1", "--duration", "0"])
        assert result.exit_code == ExitCode.USER_ERROR


# ---------------------------------------------------------------------------
# validate / capabilities
# ---------------------------------------------------------------------------


class TestValidate:
    def test_valid_plan(self, story_goal, tmp_path):
        compiled = runner.invoke(cli, ["compile", story_goal])
        path = _write(tmp_path, "plan.json", json.loads(compiled.stdout))
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == ExitCode.SUCCESS, result.output
        assert json.loads(result.stdout)["valid"] is True

    def test_invalid_plan(self, tmp_path):
        path = _write(tmp_path, "plan.json", {
            "id": "p",
            "summary": "s",
            "steps": [{"id": "a", "action": "CREATE_NODE", "nodeType": "text", "inputFrom": "ghost"}],
            "metadata": {"sourceGoal": {}, "compiledAt": 1},
        })
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == ExitCode.USER_ERROR
        assert json.loads(result.stdout)["valid"] is False


class TestCapabilities:
    def test_all_families(self):
        result = runner.invoke(cli, ["capabilities"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "# WILDMIND CANVAS CAPABILITIES" in result.stdout

    def test_one_family(self):
        result = runner.invoke(cli, ["capabilities", "--family", "video"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "VIDEO GENERATION MODELS" in result.stdout
        assert "IMAGE GENERATION MODELS" not in result.stdout

    @pytest.mark.parametrize("family", ["hologram", "connect"])
    def test_unknown_family(self, family):
        result = runner.invoke(cli, ["capabilities", "--family", family])
        assert result.exit_code == ExitCode.USER_ERROR
