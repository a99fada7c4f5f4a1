"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from ad_risk_engine.core.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
ENV_PREFIX = "AD_RISK_ENGINE_"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppConfig(BaseModel):

    corpus_dir: str | None = Field(default=None)
    keywords_document: str = Field(default="suspicious-keywords")
    patterns_document: str = Field(default="scam-patterns")
    log_level: str = Field(default="WARNING")
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file {p}: {exc}") from exc
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return value if value not in (None, "") else fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _parse_optional_str(raw: Any) -> str | None:
    value = str(raw if raw is not None else "").strip()
    return value or None


def _parse_log_level(raw: Any, fallback: str) -> str:
    value = str(raw or "").strip().upper()
    return value if value in _LOG_LEVELS else fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(f"{ENV_PREFIX}DEFAULT_CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "corpus_dir": _parse_optional_str(_pick_env("CORPUS_DIR", merged.get("corpus_dir"))),
        "keywords_document": _parse_str(
            _pick_env("KEYWORDS_DOCUMENT", merged.get("keywords_document")),
            "suspicious-keywords",
        ),
        "patterns_document": _parse_str(
            _pick_env("PATTERNS_DOCUMENT", merged.get("patterns_document")),
            "scam-patterns",
        ),
        "log_level": _parse_log_level(_pick_env("LOG_LEVEL", merged.get("log_level")), "WARNING"),
        "default_config_path": str(default_path),
    }

    try:
        cfg = AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {default_path}: {exc}") from exc
    return cfg, merged
