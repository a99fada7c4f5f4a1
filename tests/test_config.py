from __future__ import annotations

from pathlib import Path

import pytest

from ad_risk_engine.config.settings import DEFAULT_CONFIG_PATH, load_config
from ad_risk_engine.core.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "CORPUS_DIR",
        "KEYWORDS_DOCUMENT",
        "PATTERNS_DOCUMENT",
        "LOG_LEVEL",
        "DEFAULT_CONFIG_PATH",
    ):
        monkeypatch.delenv(f"AD_RISK_ENGINE_{name}", raising=False)


def test_load_config_defaults() -> None:
    cfg, merged = load_config()
    assert cfg.corpus_dir is None
    assert cfg.keywords_document == "suspicious-keywords"
    assert cfg.patterns_document == "scam-patterns"
    assert cfg.log_level == "WARNING"
    assert cfg.default_config_path == str(DEFAULT_CONFIG_PATH)
    assert isinstance(merged, dict)


def test_env_overrides_yaml(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("AD_RISK_ENGINE_CORPUS_DIR", str(tmp_path))
    monkeypatch.setenv("AD_RISK_ENGINE_LOG_LEVEL", "debug")
    cfg, _ = load_config()
    assert cfg.corpus_dir == str(tmp_path)
    assert cfg.log_level == "DEBUG"


def test_yaml_file_values(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("corpus_dir: /srv/rules\nlog_level: nonsense\n", encoding="utf-8")
    cfg, merged = load_config(path)
    assert cfg.corpus_dir == "/srv/rules"
    assert cfg.log_level == "WARNING"
    assert merged["log_level"] == "nonsense"


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    cfg, merged = load_config(tmp_path / "absent.yaml")
    assert merged == {}
    assert cfg.keywords_document == "suspicious-keywords"


def test_unparsable_yaml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("corpus_dir: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)
