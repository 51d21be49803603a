"""canvas-engine — Typer application root.

Entry point for the ``canvas-engine`` console script.  Every command reads
JSON from a file path (or ``-`` for stdin) and writes camelCase JSON to
stdout; diagnostics and logs go to stderr.

Exit codes follow :class:`canvas_engine.errors.ExitCode`.
"""
from __future__ import annotations

import json
import logging
import pathlib
import sys
from typing import Any, Callable, Mapping, NoReturn, Optional, TypeVar

import typer
from pydantic import BaseModel, ValidationError

from canvas_engine.config import get_settings
from canvas_engine.core.capabilities import default_registry, describe_capabilities
from canvas_engine.core.compiler import compile_goal_to_plan, validate_plan
from canvas_engine.core.intent_schema import CapabilityType, parse_semantic_goal
from canvas_engine.core.planner import VideoPlanDict, VideoPlanRequest, plan_video_execution
from canvas_engine.core.resolver import resolve_intent
from canvas_engine.errors import CanvasEngineError, ExitCode

logger = logging.getLogger(__name__)

T = TypeVar("T")

cli = typer.Typer(
    name="canvas-engine",
    help="Resolve canvas intents and compile goals into executable plans.",
    no_args_is_help=True,
)


@cli.callback()
def _configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fail(message: str, code: ExitCode) -> NoReturn:
    typer.echo(f"❌ {message}", err=True)
    raise typer.Exit(code=code)


def _read_json(source: str) -> dict[str, Any]:
    """Load a JSON object from ``source`` (a path, or ``-`` for stdin)."""
    try:
        text = sys.stdin.read() if source == "-" else pathlib.Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        _fail(f"Cannot read {source}: {exc}", ExitCode.USER_ERROR)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        _fail(f"Invalid JSON in {source}: {exc}", ExitCode.USER_ERROR)
    if not isinstance(data, dict):
        _fail(f"Expected a JSON object in {source}, got {type(data).__name__}", ExitCode.USER_ERROR)
    return data


def _emit(payload: BaseModel | Mapping[str, Any]) -> None:
    data = payload.model_dump(mode="json", by_alias=True) if isinstance(payload, BaseModel) else payload
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _guarded(command: str, action: Callable[[], T]) -> T:
    """Run ``action``, mapping engine errors onto exit codes."""
    try:
        return action()
    except typer.Exit:
        raise
    except CanvasEngineError as exc:
        _fail(str(exc), exc.exit_code)
    except ValidationError as exc:
        _fail(f"Invalid input: {exc}", ExitCode.USER_ERROR)
    except Exception as exc:
        logger.error("❌ canvas-engine %s error: %s", command, exc, exc_info=True)
        _fail(f"canvas-engine {command} failed: {exc}", ExitCode.INTERNAL_ERROR)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@cli.command("compile", help="Compile a SemanticGoal into a CanvasInstructionPlan.")
def compile_cmd(
    goal_json: str = typer.Argument(..., help="Path to a SemanticGoal JSON file, or '-' for stdin."),
    require_explanation: bool = typer.Option(
        False, "--require-explanation", help="Reject goals without a non-empty explanation."
    ),
) -> None:
    raw = _read_json(goal_json)
    plan = _guarded(
        "compile",
        lambda: compile_goal_to_plan(parse_semantic_goal(raw, require_explanation=require_explanation)),
    )
    _emit(plan)


@cli.command("resolve", help="Resolve an AbstractIntent into a ResolvedAction.")
def resolve_cmd(
    intent_json: str = typer.Argument(..., help="Path to an AbstractIntent JSON file, or '-' for stdin."),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Path to a canvas context JSON file (selection + state)."
    ),
) -> None:
    raw = _read_json(intent_json)
    ctx = _read_json(context) if context else None
    action = _guarded("resolve", lambda: resolve_intent(raw, ctx))
    _emit(action)


@cli.command("plan-video", help="Split a video request into model-sized segment nodes.")
def plan_video_cmd(
    model: str = typer.Option(..., "--model", "-m", help="VIDEO model id, e.g. veo-3.1."),
    duration: float = typer.Option(..., "--duration", "-d", help="Total duration in seconds."),
    prompt: str = typer.Option("", "--prompt", "-p", help="Prompt for every segment."),
    aspect_ratio: str = typer.Option("16:9", "--aspect-ratio", help="Aspect ratio for every segment."),
    x: float = typer.Option(0.0, "--x", help="Base x position of the first node."),
    y: float = typer.Option(0.0, "--y", help="Base y position of the first node."),
) -> None:
    def _plan() -> VideoPlanDict:
        request = VideoPlanRequest(
            duration=duration,
            model_id=model,
            prompt=prompt,
            aspect_ratio=aspect_ratio,
            base_position={"x": x, "y": y},
        )
        return plan_video_execution(request).to_dict()

    _emit(_guarded("plan-video", _plan))


@cli.command("validate", help="Validate a CanvasInstructionPlan JSON file.")
def validate_cmd(
    plan_json: str = typer.Argument(..., help="Path to a plan JSON file, or '-' for stdin."),
) -> None:
    raw = _read_json(plan_json)
    result = _guarded("validate", lambda: validate_plan(raw))
    _emit({"valid": result.valid, "errors": result.errors, "warnings": result.warnings})
    if not result.valid:
        raise typer.Exit(code=ExitCode.USER_ERROR)


@cli.command("capabilities", help="Print the capability registry as Markdown.")
def capabilities_cmd(
    family: Optional[str] = typer.Option(
        None, "--family", "-f", help="Only this family (IMAGE, VIDEO, TEXT, PLUGIN, MUSIC)."
    ),
) -> None:
    registry = default_registry()
    families: Optional[list[CapabilityType]] = None
    if family:
        try:
            selected = CapabilityType(family.strip().upper())
        except ValueError:
            selected = None
        if selected is None or not registry.has_family(selected):
            _fail(f"Unknown capability family '{family}'", ExitCode.USER_ERROR)
        families = [selected]
    typer.echo(describe_capabilities(registry, families, include_concepts=families is None))


if __name__ == "__main__":
    cli()
