from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_SCORING_CONFIG_PATH = _PROJECT_ROOT / "config" / "scoring.yaml"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_path(name: str, default: Path) -> Path:
    raw = _get_env(name, None)
    if raw is None:
        return default
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = _PROJECT_ROOT / path
    return path


@dataclass(frozen=True)
class Settings:
    log_level: str
    scoring_config_path: Path
    analysis_log_enabled: bool


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    scoring_config_path=_get_env_path("SCORING_CONFIG_PATH", _DEFAULT_SCORING_CONFIG_PATH),
    analysis_log_enabled=_get_env_bool("ANALYSIS_LOG_ENABLED", True),
)

if settings.log_level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
    raise RuntimeError("LOG_LEVEL must be one of: CRITICAL, ERROR, WARNING, INFO, DEBUG.")
