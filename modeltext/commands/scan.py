"""List every text occurrence of a model.

Usage: modeltext scan model.json [more.json ...]
"""

import click

from modeltext.config_runtime import load_runtime_config
from modeltext.model import load_models
from modeltext.rules.dump import emit_occurrence
from modeltext.text.cache import ScanCache
from modeltext.text.scanner import scan as scan_model
from modeltext.utils.error_handler import handle_exceptions
from modeltext.utils.logging import logger

from ._report import report_findings


@click.command("scan")
@click.argument("models", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("--save", type=click.Path(), help="Save JSON output to file")
@handle_exceptions
def scan(models, output_format, save):
    """Show every string the text traversal finds in the given JSON AST models.

    Files are merged into one model. Prelude shapes are skipped; shape names,
    member names, trait keys, trait values and namespaces are listed in
    traversal order.

    \b
    EXAMPLES:
      modeltext scan weather.json
      modeltext scan main.json extra.json --format json --save occurrences.json
    """
    config = load_runtime_config()
    model = load_models(models)
    logger.info(f"Loaded {len(model)} shapes from {len(models)} file(s)")

    findings = scan_model(model, emit_occurrence, ScanCache.from_config(config))
    report_findings(findings, output_format, save, "TEXT OCCURRENCES", config["report"]["max_rows"])
