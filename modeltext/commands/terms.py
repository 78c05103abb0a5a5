"""Search a model's text for terms.

Usage: modeltext terms model.json --term master --term slave
"""

import click

from modeltext.config_runtime import load_runtime_config
from modeltext.model import load_models
from modeltext.rules.terms import find_terms
from modeltext.text.cache import ScanCache
from modeltext.text.occurrence import LocationKind
from modeltext.text.scanner import scan
from modeltext.utils.error_handler import handle_exceptions
from modeltext.utils.exit_codes import ExitCodes
from modeltext.utils.logging import logger

from ._report import report_findings


@click.command("terms")
@click.argument("models", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--term", "terms", multiple=True, required=True, help="Term to search for (repeatable)")
@click.option(
    "--kind",
    "kinds",
    multiple=True,
    type=click.Choice([kind.value for kind in LocationKind]),
    help="Only check these location kinds (repeatable, default: all)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("--save", type=click.Path(), help="Save JSON output to file")
@click.option("--fail-on-findings", is_flag=True, help="Exit 1 if any term is found")
@handle_exceptions
def terms(models, terms, kinds, output_format, save, fail_on_findings):
    """Report shape names, member names, trait text and namespaces containing a term.

    Matching is case-insensitive substring search. Each occurrence yields one
    finding per term it contains.

    \b
    EXAMPLES:
      modeltext terms weather.json --term blacklist --term whitelist
      modeltext terms weather.json --term todo --kind annotation_value
      modeltext terms weather.json --term master --fail-on-findings || exit 1
    """
    config = load_runtime_config()
    model = load_models(models)

    selected = [LocationKind(kind) for kind in kinds] if kinds else list(LocationKind)
    analyzer = find_terms(terms, rule_name="terms", kinds=selected)

    findings = scan(model, analyzer, ScanCache.from_config(config))
    logger.info(f"Term search over {len(model)} shapes produced {len(findings)} findings")
    report_findings(findings, output_format, save, "TERM FINDINGS", config["report"]["max_rows"])

    if fail_on_findings and findings:
        logger.info(ExitCodes.get_description(ExitCodes.FINDINGS_REPORTED))
        raise SystemExit(ExitCodes.FINDINGS_REPORTED)
