from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from epv_loader.config import connection_config_from, get_settings
from epv_loader.errors import LoadError
from epv_loader.loader import export_csv, run_load
from epv_loader.reporter import print_summary
from epv_loader.utils.logging import configure_logging

app = typer.Typer(help="Generate synthetic EPV records and bulk-load them into Postgres.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    config = connection_config_from(settings)
    typer.echo(f"DB={config.masked()} | records={settings.records}")


@app.command()
def load(
    user: Optional[str] = typer.Option(None, "--user", "-U", help="Database user."),
    password: Optional[str] = typer.Option(None, "--password", help="Database password."),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Database host."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Database port."),
    database: Optional[str] = typer.Option(None, "--database", "-d", help="Database name."),
    records: Optional[int] = typer.Option(
        None,
        "--records",
        "-n",
        help="Number of records to generate (default from settings).",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON."),
) -> None:
    """
    Create the table if needed and COPY synthetic records into it.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=json_logs or settings.log_json)
    config = connection_config_from(
        settings,
        user=user,
        password=password,
        host=host,
        port=port,
        database=database,
    )
    total = records if records is not None else settings.records

    try:
        result = run_load(config, records=total)
    except LoadError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    print_summary(result)


@app.command()
def export(
    output: Path = typer.Option(..., "--output", "-o", help="CSV file to write."),
    records: Optional[int] = typer.Option(
        None,
        "--records",
        "-n",
        help="Number of records to generate (default from settings).",
    ),
) -> None:
    """
    Write the generated CSV to a file without touching the database.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    total = records if records is not None else settings.records

    try:
        written = export_csv(output, records=total)
    except OSError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wrote {written:,} records -> {output}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
