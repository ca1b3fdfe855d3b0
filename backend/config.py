"""
Runtime configuration.

Values come from the process environment (populated from backend/.env by
load_dotenv() in main.py). GEMINI_API_KEY is mandatory: without it the
server refuses to start.

  GEMINI_API_KEY=...            (API_KEY is accepted as a legacy name)
  GEMINI_MODEL=gemini-2.5-flash
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_ADMIN_EMAIL = "admin@pilgrimpath.com"
DEFAULT_ADMIN_PASSWORD = "admin"


class ConfigError(RuntimeError):
    """Raised when the environment cannot produce a usable configuration."""


class Settings(BaseModel):
    gemini_api_key: str = Field(min_length=1)
    gemini_model: str = DEFAULT_MODEL
    gemini_timeout_seconds: float = Field(default=30.0, gt=0)
    admin_email: str = DEFAULT_ADMIN_EMAIL
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    session_ttl_seconds: Optional[int] = Field(default=None, gt=0)  # None = never expire
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _split_origins(raw: Optional[str]) -> list[str]:
    if not raw:
        return ["*"]
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def _optional_int(raw: Optional[str], name: str) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _admin_value(env, name: str, default: str) -> str:
    """Unset falls back to the default; an explicitly empty value is rejected."""
    raw = env.get(name)
    if raw is None:
        return default
    if not raw.strip():
        raise ConfigError(f"{name} is set but empty; unset it to use the default")
    return raw


def load_settings(environ=None) -> Settings:
    """
    Build Settings from an environment mapping (defaults to os.environ).

    Raises ConfigError when the Gemini key is missing or a value is malformed.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("GEMINI_API_KEY") or env.get("API_KEY")
    if not api_key:
        raise ConfigError(
            "GEMINI_API_KEY environment variable not set. "
            "Add it to backend/.env or the process environment."
        )

    timeout_raw = env.get("GEMINI_TIMEOUT_SECONDS")
    try:
        timeout = float(timeout_raw) if timeout_raw else 30.0
    except ValueError as exc:
        raise ConfigError(f"GEMINI_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}") from exc

    try:
        return Settings(
            gemini_api_key=api_key,
            gemini_model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
            gemini_timeout_seconds=timeout,
            admin_email=_admin_value(env, "ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL),
            admin_password=_admin_value(env, "ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
            session_ttl_seconds=_optional_int(env.get("SESSION_TTL_SECONDS"), "SESSION_TTL_SECONDS"),
            allowed_origins=_split_origins(env.get("ALLOWED_ORIGINS")),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
    except ValueError as exc:
        # pydantic.ValidationError subclasses ValueError
        raise ConfigError(f"Invalid configuration: {exc}") from exc
