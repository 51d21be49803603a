"""Exception types and CLI exit-code contract for the canvas engine."""
from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Standardised CLI exit codes.

    0 — success
    1 — user error (unreadable or invalid input)
    2 — registry / configuration defect
    3 — internal error
    """

    SUCCESS = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    INTERNAL_ERROR = 3


class CanvasEngineError(Exception):
    """Base exception for canvas engine errors."""

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class CapabilityConfigError(CanvasEngineError):
    """The capability registry is incompletely or inconsistently specified."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=ExitCode.CONFIG_ERROR)


class UnknownModelError(CapabilityConfigError):
    """A model id was referenced that the registry does not contain."""

    def __init__(self, model_id: str, family: str) -> None:
        super().__init__(f"Unknown {family} model id '{model_id}'")
        self.model_id = model_id
        self.family = family


class MissingTemporalEnvelopeError(CapabilityConfigError):
    """A video model has no temporal limits, so it cannot be segmented."""

    def __init__(self, model_id: str) -> None:
        super().__init__(f"Model '{model_id}' is missing temporal metadata")
        self.model_id = model_id


class GoalValidationError(CanvasEngineError):
    """An upstream goal or intent payload could not be parsed."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors) or "Invalid goal payload", exit_code=ExitCode.USER_ERROR)
        self.errors = errors
