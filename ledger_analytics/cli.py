"""
Ledger Analytics — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the business-data export.
  4. Run the analysis.
  5. Report result to stdout (and optionally export files).

Install and run::

    pip install -e .
    ledger-analytics --help
    ledger-analytics validate-config
    ledger-analytics analyze --data data/business_data.json --days 30
    ledger-analytics analyze --sort total_revenue --export
    ledger-analytics totals
    ledger-analytics categories
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="ledger-analytics",
    help="Small-business ledger analytics — per-product performance scorecards.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from ledger_analytics.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from ledger_analytics.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_data_or_exit(data_path: Path):
    """Load the business-data export, exiting with code 1 if unavailable."""
    from ledger_analytics.reporting.reader import load_business_data

    data = load_business_data(data_path)
    if data is None:
        typer.echo(f"[ERROR] No readable business data at: {data_path}", err=True)
        raise typer.Exit(code=1)
    if data.skipped_entries or data.skipped_stock:
        typer.echo(
            f"  [WARN] Skipped {data.skipped_entries} invalid entr(y/ies) and "
            f"{data.skipped_stock} invalid stock item(s); see log for details."
        )
    return data


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Data file:        {config.data.data_file}")
    typer.echo(f"  Output dir:       {config.data.output_dir}")
    typer.echo(f"  Days to analyze:  {config.analysis.days_to_analyze}")
    typer.echo(f"  Table rows:       {config.report.top_n}")
    typer.echo(f"  Default sort:     {config.report.default_sort}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("analyze")
def analyze(
    data_path: Optional[str] = typer.Option(
        None,
        "--data",
        help="Business-data JSON export (default: data.data_file from config).",
    ),
    days: Optional[int] = typer.Option(
        None,
        "--days",
        min=1,
        help="Analysis window in days for the stock runway estimate.",
    ),
    top_n: Optional[int] = typer.Option(
        None,
        "--top",
        min=1,
        help="Max table rows to print.",
    ),
    sort_field: Optional[str] = typer.Option(
        None,
        "--sort",
        help="Sort field (performance_score, total_revenue, realized_profit, ...).",
    ),
    ascending: bool = typer.Option(
        False,
        "--ascending",
        help="Sort ascending instead of descending.",
    ),
    search: Optional[str] = typer.Option(
        None,
        "--search",
        help="Only show products whose name contains this text.",
    ),
    export: bool = typer.Option(
        False,
        "--export",
        help="Write JSON, CSV and Parquet reports into data.output_dir.",
    ),
    export_dir: Optional[str] = typer.Option(
        None,
        "--export-dir",
        help="Write the reports into this directory instead (implies --export).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Compute per-product performance scorecards and the portfolio summary."""
    from ledger_analytics.config import VALID_SORT_FIELDS
    from ledger_analytics.performance.engine import calculate_product_performance
    from ledger_analytics.reporting.export import (
        EXPORT_FIELDNAMES,
        export_to_csv,
        export_to_json,
        flatten_report_for_export,
        report_to_dict,
        write_report_parquet,
    )
    from ledger_analytics.reporting.formatters import (
        filter_products,
        format_integrity_warnings,
        format_performance_table,
        format_summary,
        sort_products,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    field = sort_field or config.report.default_sort
    if field not in VALID_SORT_FIELDS:
        typer.echo(
            f"[ERROR] Unknown sort field '{field}'. "
            f"Choose from: {', '.join(sorted(VALID_SORT_FIELDS))}",
            err=True,
        )
        raise typer.Exit(code=1)

    data = _load_data_or_exit(Path(data_path or config.data.data_file))
    window = days or config.analysis.days_to_analyze

    report = calculate_product_performance(data.entries, data.stock, window)

    if data.settings.name:
        typer.echo(f"Business: {data.settings.name}")
    typer.echo(
        f"  {len(data.stock)} stock item(s), {len(data.entries)} ledger entr(y/ies), "
        f"window {window}d"
    )
    typer.echo(format_summary(report.summary))

    rows = sort_products(
        filter_products(report.products, search), field, descending=not ascending
    )
    typer.echo(format_performance_table(rows, top_n=top_n or config.report.top_n))

    warning_block = format_integrity_warnings(report.integrity_warnings)
    if warning_block:
        typer.echo(warning_block)

    if export or export_dir:
        out_dir = Path(export_dir or config.data.output_dir)
        stamp = date.today().isoformat()
        json_path = export_to_json(
            report_to_dict(report), out_dir / f"performance_{stamp}.json"
        )
        csv_path = export_to_csv(
            flatten_report_for_export(report),
            out_dir / f"performance_{stamp}.csv",
            fieldnames=EXPORT_FIELDNAMES,
        )
        parquet_path = out_dir / f"performance_{stamp}.parquet"
        write_report_parquet(report, parquet_path)
        typer.echo("")
        typer.echo(f"  JSON:    {json_path}")
        typer.echo(f"  CSV:     {csv_path}")
        typer.echo(f"  Parquet: {parquet_path}")

    typer.echo("")
    typer.echo("[OK] Analysis complete.")


@app.command("totals")
def totals(
    data_path: Optional[str] = typer.Option(
        None,
        "--data",
        help="Business-data JSON export (default: data.data_file from config).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Print business-wide sales, expenses, and the expense breakdown."""
    from ledger_analytics.ledger.totals import (
        expenses_by_category,
        total_expenses,
        total_sales,
    )
    from ledger_analytics.reporting.formatters import format_ledger_totals

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    data = _load_data_or_exit(Path(data_path or config.data.data_file))
    typer.echo(
        format_ledger_totals(
            total_sales(data.entries),
            total_expenses(data.entries),
            expenses_by_category(data.entries),
        )
    )


@app.command("categories")
def categories() -> None:
    """Print the lifecycle category legend."""
    from ledger_analytics.reporting.formatters import format_category_legend

    typer.echo(format_category_legend())


if __name__ == "__main__":
    app()
