"""
Business-data reader: loads the JSON export written by the entry store.

Expected shape::

    {
      "settings": {"name": "...", "dailyTarget": 500},
      "entries":  [{"productId": "p1", "type": "SALE", "amount": 100, "quantity": 2}, ...],
      "stock":    [{"id": "p1", "name": "Soap", "quantity": 8, "totalSold": 2}, ...]
    }

Loading is permissive at the record level: a record that fails model
validation is skipped and counted, never fatal for the whole file.  A missing
or unreadable file returns ``None`` so CLI commands can print a friendly
message without try/except at the call site.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ledger_analytics.models.ledger import BusinessSettings, LedgerEntry, StockItem

logger = logging.getLogger(__name__)


@dataclass
class LoadedBusinessData:
    """Parsed business-data export plus counts of skipped records."""

    settings:        BusinessSettings = field(default_factory=BusinessSettings)
    entries:         list[LedgerEntry] = field(default_factory=list)
    stock:           list[StockItem] = field(default_factory=list)
    skipped_entries: int = 0
    skipped_stock:   int = 0


def parse_business_data(raw: dict[str, Any]) -> LoadedBusinessData:
    """Parse a decoded business-data dict into models.

    Invalid entry / stock records are skipped with a WARNING log line.
    Invalid or missing settings fall back to defaults.
    """
    result = LoadedBusinessData()

    settings_raw = raw.get("settings")
    if isinstance(settings_raw, dict):
        try:
            result.settings = BusinessSettings.model_validate(settings_raw)
        except ValidationError as exc:
            logger.warning("Invalid business settings, using defaults: %s", exc)

    for idx, rec in enumerate(_records(raw, "entries")):
        try:
            result.entries.append(LedgerEntry.model_validate(rec))
        except ValidationError as exc:
            result.skipped_entries += 1
            logger.warning("Skipping invalid ledger entry #%d: %s", idx, exc)

    for idx, rec in enumerate(_records(raw, "stock")):
        try:
            result.stock.append(StockItem.model_validate(rec))
        except ValidationError as exc:
            result.skipped_stock += 1
            logger.warning("Skipping invalid stock item #%d: %s", idx, exc)

    logger.debug(
        "Parsed business data: %d entries (%d skipped), %d stock items (%d skipped)",
        len(result.entries), result.skipped_entries,
        len(result.stock), result.skipped_stock,
    )
    return result


def _records(raw: dict[str, Any], key: str) -> list[Any]:
    """Return the record list stored under ``key``; anything but a list is empty."""
    section = raw.get(key)
    if section is None:
        return []
    if not isinstance(section, list):
        logger.warning(
            "Business data section '%s' is %s, not a list; ignoring it",
            key, type(section).__name__,
        )
        return []
    return section


def load_business_data(path: Path) -> LoadedBusinessData | None:
    """Load and parse the business-data JSON at ``path``.

    Returns:
        LoadedBusinessData, or None if the file is missing, unreadable, or
        not a JSON object.
    """
    if not path.exists():
        logger.debug("No business data file at %s", path)
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to load business data %s: %s", path, exc)
        return None
    if not isinstance(raw, dict):
        logger.warning("Business data %s is not a JSON object", path)
        return None
    return parse_business_data(raw)
