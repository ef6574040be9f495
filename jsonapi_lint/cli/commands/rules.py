"""Rules management commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsonapi_lint.rules.config import find_config, load_config, save_config
from jsonapi_lint.rules.engine import RulesEngine, save_rules_to_yaml
from jsonapi_lint.rulesets import RULESETS

console = Console()

SEVERITY_STYLES = {
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "hint": "cyan",
}


def _load_engine(project_dir: str) -> RulesEngine:
    """Build the engine configured for a project directory, exiting on errors."""
    try:
        return RulesEngine.from_config(load_config(find_config(project_dir)))
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(2)


def _group_of_rules() -> dict[str, str]:
    """Map every bundled rule id to the name of its group."""
    return {rule.id: name for name, module in RULESETS.items() for rule in module.RULES}


@click.group()
def rules() -> None:
    """Rules management commands."""
    pass


@rules.command("list")
@click.option(
    "--ruleset",
    type=click.Choice(list(RULESETS)),
    default=None,
    help="Only list rules of this group",
)
@click.option("--project-dir", default=".", help="Project root directory")
def list_rules(ruleset: str | None, project_dir: str) -> None:
    """List available rules."""
    engine = _load_engine(project_dir)
    groups = _group_of_rules()

    table = Table(show_header=True, title="Rules")
    table.add_column("ID")
    table.add_column("Group")
    table.add_column("Severity")
    table.add_column("Enabled")

    shown = 0
    for rule in engine.rules.values():
        group = groups.get(rule.id, "custom")
        if ruleset and group != ruleset:
            continue

        severity_style = SEVERITY_STYLES.get(rule.severity.value, "white")
        table.add_row(
            rule.id,
            group,
            f"[{severity_style}]{rule.severity.value}[/{severity_style}]",
            "[green]yes[/green]" if rule.enabled else "[red]no[/red]",
        )
        shown += 1

    if not shown:
        console.print("[yellow]No rules found[/yellow]")
        return

    console.print(table)
    console.print(f"\n[bold]{shown}[/bold] rule(s)")


@rules.command("show")
@click.argument("rule_id")
@click.option("--project-dir", default=".", help="Project root directory")
def show_rule(rule_id: str, project_dir: str) -> None:
    """Show the definition of a rule.

    RULE_ID is the identifier of the rule to show.
    """
    engine = _load_engine(project_dir)
    rule = engine.rules.get(rule_id)
    if rule is None:
        console.print(f"[red]Error:[/red] Rule '{rule_id}' not found")
        raise SystemExit(1)

    severity_style = SEVERITY_STYLES.get(rule.severity.value, "white")
    console.print(f"[bold]{rule.id}[/bold]")
    console.print(f"  Description: {escape(rule.description)}")
    console.print(f"  Severity: [{severity_style}]{rule.severity.value}[/{severity_style}]")
    console.print(f"  Enabled: {'yes' if rule.enabled else 'no'}")
    console.print(f"  Message: {escape(rule.message)}")
    if rule.documentation_url:
        console.print(f"  Documentation: {rule.documentation_url}")

    console.print("  Given:")
    for selector in rule.selectors:
        console.print(f"    - {escape(str(selector))}")

    console.print("  Then:")
    for then in rule.thens:
        details = then.function.name
        if then.field is not None:
            details += f" (field: {then.field if isinstance(then.field, str) else '.'.join(then.field)})"
        if then.function_options:
            details += f" {then.function_options}"
        console.print(f"    - {escape(details)}")


@rules.command("enable")
@click.argument("rule_id")
@click.option("--project-dir", default=".", help="Project root directory")
def enable_rule(rule_id: str, project_dir: str) -> None:
    """Enable a rule for the project.

    RULE_ID is the identifier of the rule to enable.
    """
    _toggle_rule(rule_id, project_dir, enabled=True)


@rules.command("disable")
@click.argument("rule_id")
@click.option("--project-dir", default=".", help="Project root directory")
def disable_rule(rule_id: str, project_dir: str) -> None:
    """Disable a rule for the project.

    RULE_ID is the identifier of the rule to disable.
    """
    _toggle_rule(rule_id, project_dir, enabled=False)


@rules.command("export")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--project-dir", default=".", help="Project root directory")
def export_rules(output: Path, project_dir: str) -> None:
    """Write the configured rules to a YAML file.

    OUTPUT is the file to write. It can be listed under ``custom_rules`` in
    another project's configuration, where its rules take the place of the
    bundled rules with the same ids.
    """
    engine = _load_engine(project_dir)
    save_rules_to_yaml(engine.rules.values(), output)
    console.print(f"[green]Exported {len(engine.rules)} rule(s) to {output}[/green]")


def _toggle_rule(rule_id: str, project_dir: str, enabled: bool) -> None:
    """Toggle a rule's enabled state in the project configuration."""
    config_file = find_config(project_dir)
    engine = _load_engine(project_dir)

    if rule_id not in engine.rules:
        console.print(f"[red]Error:[/red] Rule '{rule_id}' not found")
        raise SystemExit(1)

    config = load_config(config_file)
    current = config.rules.get(rule_id)
    if not enabled:
        config.rules[rule_id] = False
    elif current is None or current is False or current == "off":
        config.rules[rule_id] = True

    save_config(config, config_file)

    action = "enabled" if enabled else "disabled"
    console.print(f"[green]Rule '{rule_id}' {action}[/green]")
