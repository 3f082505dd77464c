"""Ledger Analytics — per-product performance scorecards for small-business ledgers."""

__version__ = "0.1.0"
