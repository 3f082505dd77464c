"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local overrides (gitignored)
  4. Environment variables        — ``LEDGER_ANALYTICS_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance.  The performance engine itself
takes plain arguments (``days_to_analyze``) and never reads configuration.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────

VALID_SORT_FIELDS = frozenset({
    "performance_score", "total_revenue", "realized_profit", "stock_efficiency",
    "profit_margin", "units_sold", "days_of_stock_left", "product_name",
})


class AnalysisConfig(BaseModel):
    """Performance analysis parameters."""

    model_config = ConfigDict(frozen=True)

    days_to_analyze: int = 30

    @field_validator("days_to_analyze")
    @classmethod
    def validate_days(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"days_to_analyze must be positive, got {v}.")
        return v


class DataConfig(BaseModel):
    """Filesystem paths for the business-data export and report outputs."""

    model_config = ConfigDict(frozen=True)

    data_file: str = "data/business_data.json"
    output_dir: str = "data/outputs"


class ReportConfig(BaseModel):
    """CLI report presentation settings."""

    model_config = ConfigDict(frozen=True)

    top_n: int = 10
    default_sort: str = "performance_score"

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"top_n must be >= 1, got {v}.")
        return v

    @field_validator("default_sort")
    @classmethod
    def validate_sort(cls, v: str) -> str:
        if v not in VALID_SORT_FIELDS:
            raise ValueError(
                f"Unknown default_sort '{v}'. Must be one of {sorted(VALID_SORT_FIELDS)}."
            )
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/ledger_analytics.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    analysis: AnalysisConfig = AnalysisConfig()
    data: DataConfig = DataConfig()
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply LEDGER_ANALYTICS_* env vars to the raw config dict.

    Supported overrides:
      LEDGER_ANALYTICS_DATA_FILE  → raw["data"]["data_file"]
      LEDGER_ANALYTICS_DAYS       → raw["analysis"]["days_to_analyze"]
      LEDGER_ANALYTICS_LOG_LEVEL  → raw["logging"]["level"]
      LEDGER_ANALYTICS_DEBUG      → raw["debug"]
    """
    if data_file := os.environ.get("LEDGER_ANALYTICS_DATA_FILE"):
        raw.setdefault("data", {})["data_file"] = data_file

    if days := os.environ.get("LEDGER_ANALYTICS_DAYS"):
        raw.setdefault("analysis", {})["days_to_analyze"] = days

    if log_level := os.environ.get("LEDGER_ANALYTICS_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("LEDGER_ANALYTICS_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        analysis=AnalysisConfig(**raw.get("analysis", {})),
        data=DataConfig(**raw.get("data", {})),
        report=ReportConfig(**raw.get("report", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
