"""
WildMind Canvas Engine Configuration

Environment-based configuration for the capability resolver and compiler.
"""
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _app_version_from_package() -> str:
    """Read version from pyproject.toml — the single source of truth."""
    try:
        from importlib.metadata import version
        return version("wildmind-canvas-engine")
    except Exception:
        pass
    # Fallback: parse pyproject.toml directly (dev / non-installed mode)
    try:
        from pathlib import Path
        import re
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject.read_text(), re.MULTILINE)
        if match:
            return match.group(1)
    except Exception:
        pass
    return "0.0.0-unknown"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    app_name: str = "WildMind Canvas Engine"
    app_version: str = _app_version_from_package()
    debug: bool = False
    log_level: str = "INFO"

    # Compiler defaults (used only when the goal leaves the value open)
    default_story_duration_seconds: int = 30
    default_video_request_duration_seconds: int = 10

    # Video planner layout (canvas units between consecutive segment nodes)
    video_node_spacing: int = 450

    model_config = SettingsConfigDict(
        env_prefix="CANVAS_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            logging.getLogger(__name__).warning(f"Unknown log level '{v}', using INFO")
            return "INFO"
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience access
settings = get_settings()
