"""
Input data models for the bookkeeping ledger.

ledger : LedgerEntry, StockItem, BusinessSettings
"""
