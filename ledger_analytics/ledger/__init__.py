"""
Ledger-wide totals (independent of product attribution).

totals : sales_amount(), expense_amount(), entry_profit(), total_sales(),
         total_expenses(), expenses_by_category()
"""
