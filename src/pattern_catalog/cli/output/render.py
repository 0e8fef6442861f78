"""Rich renderables for the `patterns` command line."""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from pattern_catalog.catalog.domain.pattern import PatternInfo
from pattern_catalog.catalog.domain.trace import DemonstrationTrace

_CATEGORY_STYLES: dict[str, str] = {
    "behavioral": "cyan",
    "creational": "green",
    "structural": "magenta",
}


def catalog_table(infos: list[PatternInfo]) -> Table:
    """Build a table with one row per pattern."""
    table = Table(title="Design pattern catalog", show_lines=False)
    table.add_column("Pattern ID", style="bold", no_wrap=True)
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Summary")
    for info in infos:
        style = _CATEGORY_STYLES.get(info.category, "default")
        table.add_row(
            info.pattern_id,
            info.title,
            f"[{style}]{info.category}[/{style}]",
            info.summary,
        )
    return table


def print_trace(console: Console, info: PatternInfo, trace: DemonstrationTrace) -> None:
    """Print a titled section holding the trace lines verbatim."""
    style = _CATEGORY_STYLES.get(info.category, "default")
    console.rule(f"[bold {style}]{info.title}[/bold {style}]")
    for line in trace.lines:
        # Traces are literal text; never interpret them as rich markup.
        console.print(line, markup=False, highlight=False)


def print_details(
    console: Console, info: PatternInfo, sample: Any, trace: DemonstrationTrace
) -> None:
    """Print metadata, sample input, and sample trace for one pattern."""
    rows: list[tuple[str, str]] = [
        ("Pattern ID", info.pattern_id),
        ("Title", info.title),
        ("Category", info.category),
        ("Summary", info.summary),
        ("Sample input", json.dumps(sample)),
    ]
    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        console.print(f"[dim]{label:<{label_w}}[/dim]  ", end="")
        console.print(value, markup=False, highlight=False)
    print_trace(console=console, info=info, trace=trace)
