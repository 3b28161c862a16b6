from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from epv_loader.loader import LoadResult


def print_summary(result: LoadResult, console: Optional[Console] = None) -> None:
    """
    Render a completed load run as a rich table.
    """
    console = console or Console()

    table = Table(title="EPV Load Summary", box=box.ROUNDED)
    table.add_column("Table", style="cyan", no_wrap=True)
    table.add_column("Rows", justify="right", style="magenta")
    table.add_column("Duration (s)", justify="right", style="green")
    table.add_column("Throughput (rows/s)", justify="right", style="bold green")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")

    mem_bytes = result.get("peak_rss_bytes") or 0
    table.add_row(
        result.get("table", "?"),
        f"{result.get('rows', 0):,}",
        f"{result.get('duration_seconds', 0.0):.2f}",
        f"{result.get('throughput_rows_per_sec', 0.0):,.2f}",
        f"{mem_bytes / (1024 * 1024):.2f}",
    )

    console.print(table)


__all__ = ["print_summary"]
