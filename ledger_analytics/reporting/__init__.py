"""
Reporting: input loading, terminal formatting, and file export.

reader     : load_business_data() — business-data JSON export -> models.
formatters : ASCII tables and summaries for ``typer.echo()``, plus the
             sort/filter helpers the table view uses.
export     : JSON / CSV / Parquet writers for a PerformanceReport.
"""
