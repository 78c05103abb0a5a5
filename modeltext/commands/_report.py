"""Shared output for commands that print findings."""

import json

import click

from modeltext.pipeline.ui import console, findings_table, print_success
from modeltext.utils.helpers import save_json_file


def report_findings(findings, output_format: str, save: str | None, title: str, max_rows: int) -> None:
    """Print findings as a table or JSON, optionally saving the JSON to a file."""
    payload = {
        "findings": [finding.to_dict() for finding in findings],
        "summary": {"total": len(findings)},
    }

    if save:
        save_json_file(payload, save)

    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
        return

    if not findings:
        print_success(f"{title}: nothing reported")
        return

    console.print(findings_table(findings, title, max_rows))
    if len(findings) > max_rows:
        console.print(f"[dim]... {len(findings) - max_rows} more (use --format json to see all)[/dim]")
    console.print(f"Total: {len(findings)}")
    if save:
        console.print(f"Saved to [path]{save}[/path]")
