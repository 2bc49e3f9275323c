# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  The entry points call
# load_dotenv() first, so a local .env file works too:
#
#   GEMINI_API_KEY=...              (required)
#   GEMINI_MODEL=gemini-2.5-flash
#   GROUNDING_SERVER_NAME=gemini-grounding-agent
#   LOG_LEVEL=INFO
#   AGENT_MODEL=openrouter/openai/gpt-4o
#
# A missing API key is a STARTUP failure, not a per-call one: the server
# refuses to start rather than registering tools that can only ever fail.
# =============================================================================

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from core.errors import ConfigurationError

API_KEY_ENV_VAR = "GEMINI_API_KEY"

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_SERVER_NAME = "gemini-grounding-agent"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    model: str = DEFAULT_MODEL
    server_name: str = DEFAULT_SERVER_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    agent_model: str = DEFAULT_AGENT_MODEL


def _read(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name, "").strip()
    return value or default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment.

    Raises:
        ConfigurationError: GEMINI_API_KEY is missing or blank, or LOG_LEVEL
            is not a standard logging level name.
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV_VAR} environment variable is required")

    log_level = _read(environ, "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL: {log_level!r}")

    return Settings(
        gemini_api_key=api_key,
        model=_read(environ, "GEMINI_MODEL", DEFAULT_MODEL),
        server_name=_read(environ, "GROUNDING_SERVER_NAME", DEFAULT_SERVER_NAME),
        log_level=log_level,
        agent_model=_read(environ, "AGENT_MODEL", DEFAULT_AGENT_MODEL),
    )
