"""Document linting CLI command."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsonapi_lint.document import load_document
from jsonapi_lint.rules.config import find_config, load_config
from jsonapi_lint.rules.engine import RulesEngine
from jsonapi_lint.rules.schemas import LintResult, RuleSeverity
from jsonapi_lint.rulesets import RULESETS

console = Console()

SEVERITY_STYLES = {
    RuleSeverity.ERROR: "red",
    RuleSeverity.WARNING: "yellow",
    RuleSeverity.INFO: "blue",
    RuleSeverity.HINT: "cyan",
}


@click.command("lint")
@click.argument("document_path", metavar="DOCUMENT", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--ruleset",
    "rulesets",
    multiple=True,
    type=click.Choice(list(RULESETS)),
    help="Only run these rule groups (repeatable)",
)
@click.option("--rule", "rule_ids", multiple=True, help="Only run these rules (repeatable)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: .jsonapi-lint.yaml in the current directory)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option(
    "--fail-severity",
    type=click.Choice([severity.value for severity in RuleSeverity]),
    default=None,
    help="Lowest severity that makes the command fail",
)
def lint_command(
    document_path: Path,
    rulesets: tuple[str, ...],
    rule_ids: tuple[str, ...],
    config_path: Path | None,
    output_format: str,
    fail_severity: str | None,
) -> None:
    """Lint an OpenAPI document against the JSON:API rules.

    Exits with 1 when a result at or above the fail severity is found and
    with 2 when the document, configuration or rules cannot be used.

    Examples:

        jsonapi-lint lint openapi.yaml

        jsonapi-lint lint openapi.yaml --ruleset errors-error-objects

        jsonapi-lint lint openapi.json --format json --fail-severity warning
    """
    # Load-time problems (document, config, rule definitions) all derive from ValueError
    try:
        config = load_config(config_path or find_config(Path.cwd()))
        if rulesets:
            config.rulesets = list(rulesets)
        if fail_severity:
            config.fail_severity = RuleSeverity(fail_severity)

        engine = RulesEngine.from_config(config, logger=logging.getLogger("jsonapi_lint.lint"))
        if rule_ids:
            unknown = [rule_id for rule_id in rule_ids if rule_id not in engine.rules]
            if unknown:
                console.print(f"[red]Error:[/red] Unknown rule(s): {', '.join(unknown)}")
                raise SystemExit(2)
            engine.disable_all()
            engine.enable(rule_ids)

        document = load_document(document_path)
        results = engine.run(document)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(2)

    if output_format == "json":
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        _print_results(document_path, results)

    if any(result.severity.at_least(config.fail_severity) for result in results):
        raise SystemExit(1)


def _print_results(document_path: Path, results: list[LintResult]) -> None:
    """Display results as a table followed by a summary."""
    if not results:
        console.print(f"[green]No problems found in {document_path}[/green]")
        return

    table = Table(show_header=True, title=str(document_path))
    table.add_column("Severity", style="bold")
    table.add_column("Rule")
    table.add_column("Path")
    table.add_column("Message")

    for result in results:
        style = SEVERITY_STYLES.get(result.severity, "white")
        table.add_row(
            f"[{style}]{result.severity.value}[/{style}]",
            result.code,
            escape(result.path_string),
            escape(result.message),
        )

    console.print(table)

    # Summary
    counts = {severity: 0 for severity in RuleSeverity}
    for result in results:
        counts[result.severity] += 1

    console.print()
    for severity, count in counts.items():
        if count:
            style = SEVERITY_STYLES[severity]
            console.print(f"[{style}]{severity.value.capitalize()}: {count}[/{style}]", end=" ")
    console.print()
