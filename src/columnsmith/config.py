"""Configuration management for ColumnSmith."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


def _parse_optional_path(name: str) -> Optional[Path]:
    """Read an optional path from an environment variable."""
    value = os.getenv(name)
    if value:
        return Path(value)
    return None


class Settings(BaseModel):
    """Application settings."""

    # Matching thresholds
    acceptance_threshold: float = float(os.getenv("ACCEPTANCE_THRESHOLD", "0.5"))
    suggestion_threshold: float = float(os.getenv("SUGGESTION_THRESHOLD", "0.2"))  # Suggestions must score above this
    max_suggestions: int = int(os.getenv("MAX_SUGGESTIONS", "3"))

    # Input caps - keep interactive imports responsive on pathological sheets
    max_headers: int = int(os.getenv("MAX_HEADERS", "500"))
    max_fields: int = int(os.getenv("MAX_FIELDS", "200"))

    # Optional JSON file of extra aliases merged over the built-in registry
    alias_registry_path: Optional[Path] = _parse_optional_path("ALIAS_REGISTRY_PATH")

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()


def configure_logging(level: str) -> None:
    """
    Set the root logger level, installing a stderr handler if none exists.

    Raises:
        ValueError: If level is not a standard logging level name
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level}'")

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(numeric_level)


settings = Settings()
