"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores de zona local leen la config de forma consistente.
- `datez-doctor set-local` persiste valores en el `.env` global del usuario.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "datez"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "datez"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "datez"
    return Path.home() / ".config" / "datez"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# datez user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Precedence follows pydantic-settings: init kwargs, environment
    (`DATEZ_*`), project `.env`, then the user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATEZ_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    local_zone_env_var: str = Field(
        default="TZ",
        min_length=1,
        description="Environment variable holding a local zone override.",
    )
    local_zone: str | None = Field(
        default=None,
        description="Configured local zone, consulted after the environment variable.",
    )
    localtime_path: Path = Field(
        default=Path("/etc/localtime"),
        description="Symlink whose target names the system zone on POSIX hosts.",
    )
    show_local: bool = Field(
        default=True,
        description="Append the host's local zone to the output when it resolves.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the stderr handler.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.strip().upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return upper

    @field_validator("local_zone")
    @classmethod
    def _blank_zone_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


def load_settings() -> AppSettings:
    """Build `AppSettings`, raising `ConfigurationError` on invalid values."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"DATEZ_{'.'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"invalid configuration: {problems}") from exc
