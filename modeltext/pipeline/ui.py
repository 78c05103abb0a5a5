"""Central UI handler for modeltext.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from modeltext.pipeline.ui import console, print_success

    console.print("[success]No findings[/success]")
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

MODELTEXT_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "danger": "bold red",
    "note": "cyan",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
})

console = Console(
    theme=MODELTEXT_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")


def findings_table(findings, title: str, max_rows: int) -> Table:
    """Build a table of findings, truncated to max_rows."""
    table = Table(title=title, show_lines=False)
    table.add_column("Kind", style="dim")
    table.add_column("Location", style="path")
    table.add_column("Text")
    table.add_column("Rule")

    for finding in findings[:max_rows]:
        table.add_row(
            finding.occurrence.location_kind.value,
            Text(finding.location),
            Text(finding.occurrence.text),
            finding.rule_name,
        )
    return table
