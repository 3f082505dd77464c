"""
Tests for ledger_analytics/config.py.

What we test
------------
  - Defaults when the TOML is empty.
  - TOML sections map onto sub-configs.
  - local.toml next to the config file overrides it (deep merge).
  - LEDGER_ANALYTICS_* env vars override TOML values.
  - Validation errors for bad values; FileNotFoundError for a missing file.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ledger_analytics.config import AppConfig, _deep_merge, load_config

_ENV_VARS = (
    "LEDGER_ANALYTICS_DATA_FILE",
    "LEDGER_ANALYTICS_DAYS",
    "LEDGER_ANALYTICS_LOG_LEVEL",
    "LEDGER_ANALYTICS_DEBUG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _toml(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "default.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults(tmp_path: Path) -> None:
    cfg = load_config(_toml(tmp_path, ""))
    assert cfg == AppConfig()
    assert cfg.analysis.days_to_analyze == 30
    assert cfg.report.default_sort == "performance_score"


def test_sections_parsed(tmp_path: Path) -> None:
    cfg = load_config(_toml(tmp_path, """
[analysis]
days_to_analyze = 14

[data]
data_file = "shop.json"

[report]
top_n = 3
default_sort = "total_revenue"

[logging]
level = "debug"
"""))
    assert cfg.analysis.days_to_analyze == 14
    assert cfg.data.data_file == "shop.json"
    assert cfg.report.top_n == 3
    assert cfg.report.default_sort == "total_revenue"
    assert cfg.logging.level == "DEBUG"


def test_local_override(tmp_path: Path) -> None:
    path = _toml(tmp_path, '[analysis]\ndays_to_analyze = 14\n[data]\noutput_dir = "out"\n')
    (tmp_path / "local.toml").write_text("[analysis]\ndays_to_analyze = 7\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.analysis.days_to_analyze == 7
    assert cfg.data.output_dir == "out"


def test_env_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LEDGER_ANALYTICS_DAYS", "60")
    monkeypatch.setenv("LEDGER_ANALYTICS_DATA_FILE", "/tmp/other.json")
    monkeypatch.setenv("LEDGER_ANALYTICS_LOG_LEVEL", "warning")
    monkeypatch.setenv("LEDGER_ANALYTICS_DEBUG", "yes")
    cfg = load_config(_toml(tmp_path, "[analysis]\ndays_to_analyze = 14\n"))
    assert cfg.analysis.days_to_analyze == 60
    assert cfg.data.data_file == "/tmp/other.json"
    assert cfg.logging.level == "WARNING"
    assert cfg.debug is True


def test_top_level_debug_flag(tmp_path: Path) -> None:
    cfg = load_config(_toml(tmp_path, "debug = true\n[analysis]\ndays_to_analyze = 7\n"))
    assert cfg.debug is True
    assert cfg.analysis.days_to_analyze == 7


@pytest.mark.parametrize(
    "body",
    [
        "[analysis]\ndays_to_analyze = 0\n",
        "[report]\ntop_n = 0\n",
        '[report]\ndefault_sort = "colour"\n',
        '[logging]\nlevel = "LOUD"\n',
    ],
)
def test_invalid_values(tmp_path: Path, body: str) -> None:
    with pytest.raises(ValidationError):
        load_config(_toml(tmp_path, body))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_deep_merge() -> None:
    merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}


def test_config_frozen() -> None:
    cfg = AppConfig()
    with pytest.raises(ValidationError):
        cfg.debug = True
