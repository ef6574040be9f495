"""Rules engine for linting OpenAPI documents."""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from jsonapi_lint.document import resolve_refs
from jsonapi_lint.rules.functions import FunctionContext, print_value
from jsonapi_lint.rules.schemas import (
    KEY_FIELD,
    MISSING,
    ConfigError,
    FieldSpec,
    LintResult,
    Rule,
    RuleExecutionError,
    RulesetError,
    RuleSeverity,
    Ruleset,
)
from jsonapi_lint.rules.selectors import compile_selector, find

if TYPE_CHECKING:
    from jsonapi_lint.rules.config import LintConfig

TEMPLATE_VARIABLE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class RulesEngine:
    """Engine for running a ruleset against OpenAPI documents.

    The engine works on its own copies of the rules, so enabling, disabling
    or overriding severities never changes the ruleset it was built from.
    """

    def __init__(
        self,
        ruleset: Ruleset,
        logger: logging.Logger | None = None,
        resolve_refs: bool = True,
    ) -> None:
        """Initialize the rules engine.

        Args:
            ruleset: Rules to run.
            logger: Logger handed to every function; defaults to this module's.
            resolve_refs: Whether rules see the document with local $refs inlined.
        """
        self.ruleset = ruleset
        self.rules: dict[str, Rule] = {rule.id: copy.copy(rule) for rule in ruleset}
        self.logger = logger or logging.getLogger(__name__)
        self.resolve_refs = resolve_refs

    @classmethod
    def from_config(cls, config: LintConfig, logger: logging.Logger | None = None) -> RulesEngine:
        """Build an engine from project configuration.

        A custom rule may redefine a bundled rule once, so a file written by
        ``rules export`` can be used as a custom rules file.

        Args:
            config: Loaded project configuration.
            logger: Logger handed to every function.

        Returns:
            Engine with the configured groups, custom rules and overrides.
        """
        from jsonapi_lint.rulesets import bundle

        ruleset = bundle(config.rulesets or None)
        bundled = set(ruleset.rules)
        for rules_path in config.custom_rule_paths:
            for rule in load_rules_from_yaml(rules_path):
                ruleset.add(rule, replace=rule.id in bundled)
                bundled.discard(rule.id)

        engine = cls(ruleset, logger=logger, resolve_refs=config.resolve_refs)
        engine.apply_overrides(config.rules)
        return engine

    def apply_overrides(self, overrides: Mapping[str, bool | str]) -> None:
        """Enable, disable or change the severity of rules.

        Args:
            overrides: Rule id mapped to ``False``/``"off"`` to disable,
                ``True`` to enable, or a severity name.

        Raises:
            ConfigError: If a severity name is not recognised.
        """
        for rule_id, setting in overrides.items():
            rule = self.rules.get(rule_id)
            if rule is None:
                self.logger.warning("Ignoring override for unknown rule: %s", rule_id)
                continue

            if setting is False or setting == "off":
                rule.enabled = False
            elif setting is True:
                rule.enabled = True
            else:
                try:
                    rule.severity = RuleSeverity(setting)
                except ValueError as e:
                    raise ConfigError(
                        f"Invalid severity for rule '{rule_id}': {setting!r}"
                    ) from e
                rule.enabled = True

    def disable_all(self) -> None:
        """Disable every rule."""
        for rule in self.rules.values():
            rule.enabled = False

    def enable(self, rule_ids: Iterable[str]) -> None:
        """Enable the given rules; unknown ids are ignored."""
        for rule_id in rule_ids:
            rule = self.rules.get(rule_id)
            if rule is not None:
                rule.enabled = True

    def enabled_rules(self) -> list[Rule]:
        """Get the rules that will run."""
        return [rule for rule in self.rules.values() if rule.enabled]

    def rule_ids(self) -> list[str]:
        """Get the ids of all rules, enabled or not."""
        return list(self.rules)

    def get_rule(self, rule_id: str) -> Rule:
        """Get a rule by id.

        Raises:
            RulesetError: If no rule has that id.
        """
        rule = self.rules.get(rule_id)
        if rule is None:
            raise RulesetError(f"Unknown rule: {rule_id}")
        return rule

    def run(self, document: Any, rules: Iterable[Rule] | None = None) -> list[LintResult]:
        """Lint a document.

        Args:
            document: Parsed OpenAPI document. It is never modified.
            rules: Rules to evaluate instead of the enabled ones.

        Returns:
            De-duplicated results sorted by path, then rule id.

        Raises:
            RuleExecutionError: If a function raises.
            ReferenceResolutionError: If a local $ref does not resolve.
        """
        selected = self.enabled_rules() if rules is None else list(rules)
        resolved: Any = None

        results: list[LintResult] = []
        for rule in selected:
            if rule.resolved and self.resolve_refs:
                if resolved is None:
                    resolved = resolve_refs(document)
                target_document = resolved
            else:
                target_document = document

            rule_results = self._run_rule(rule, target_document)
            self.logger.debug("Rule %s produced %d result(s)", rule.id, len(rule_results))
            results.extend(rule_results)

        return _sort_results(_deduplicate(results))

    def results_for(self, document: Any, rule_id: str) -> list[LintResult]:
        """Lint a document with a single rule, enabled or not."""
        return self.run(document, rules=[self.get_rule(rule_id)])

    def _run_rule(self, rule: Rule, document: Any) -> list[LintResult]:
        """Evaluate every selector and invocation of one rule."""
        results: list[LintResult] = []

        for selector in rule.selectors:
            for path, value in find(selector, document):
                for then in rule.thens:
                    for target_path, target in _targets(path, value, then.field):
                        context = FunctionContext(
                            path=target_path, document=document, rule=rule, logger=self.logger
                        )
                        try:
                            output = then.function(target, then.function_options, context)
                        except Exception as e:
                            self.logger.error(
                                "Function %s failed for rule %s at %s",
                                then.function.name,
                                rule.id,
                                context.path_string,
                            )
                            raise RuleExecutionError(
                                f"Rule '{rule.id}' failed at {context.path_string}: {e}"
                            ) from e

                        for item in output or []:
                            results.append(_to_result(rule, item, target_path, target))

        return results


def _targets(path: list[Any], value: Any, field: FieldSpec) -> Iterator[tuple[list[Any], Any]]:
    """Resolve the ``field`` of an invocation against one matched node."""
    if field is None:
        yield path, value
        return

    if field == KEY_FIELD:
        if isinstance(value, Mapping):
            for key in value:
                yield [*path, key], key
        return

    keys = field.split(".") if isinstance(field, str) else list(field)
    current = value
    for key in keys:
        if isinstance(current, Mapping) and key in current:
            current = current[key]
        elif isinstance(current, list) and str(key).isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            current = MISSING
            break
    yield [*path, *keys], current


def _to_result(rule: Rule, item: dict[str, Any], target_path: list[Any], target: Any) -> LintResult:
    """Complete a partial function result into a LintResult."""
    path = list(item.get("path", target_path))
    variables = {
        "error": item.get("message", ""),
        "description": rule.description,
        "path": ".".join(str(segment) for segment in path),
        "property": str(path[-1]) if path else "",
        "value": print_value(target),
    }
    message = TEMPLATE_VARIABLE.sub(
        lambda match: variables.get(match.group(1), match.group(0)), rule.message
    )
    return LintResult(code=rule.id, message=message, path=path, severity=rule.severity)


def _deduplicate(results: list[LintResult]) -> list[LintResult]:
    seen: set[tuple[Any, ...]] = set()
    unique: list[LintResult] = []
    for result in results:
        key = (result.code, tuple(str(segment) for segment in result.path), result.message)
        if key in seen:
            continue
        seen.add(key)
        unique.append(result)
    return unique


def _sort_results(results: list[LintResult]) -> list[LintResult]:
    return sorted(results, key=lambda result: ([str(segment) for segment in result.path], result.code))


def load_rules_from_yaml(yaml_path: Path | str) -> list[Rule]:
    """Load rules from a YAML file.

    Args:
        yaml_path: Path to the YAML file.

    Returns:
        List of Rule objects; empty if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or parsed, or is not a
            mapping holding a list of rule mappings.
        RulesetError: If a selector is not valid JSONPath.
        UnknownFunctionError: If a rule names an unregistered function.
        InvalidFunctionOptionsError: If a rule has invalid function options.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        return []

    try:
        content = yaml_path.read_text()
        data = yaml.safe_load(content) or {}
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Could not load rules from {yaml_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Rules must be a mapping with a 'rules' list: {yaml_path}")

    rules_data = data.get("rules") or []
    if not isinstance(rules_data, list) or not all(isinstance(r, dict) for r in rules_data):
        raise ConfigError(f"'rules' must be a list of rule mappings: {yaml_path}")

    rules = [Rule.from_dict(r) for r in rules_data]
    for rule in rules:
        for selector in rule.selectors:
            compile_selector(selector)
    return rules


def save_rules_to_yaml(rules: Iterable[Rule], yaml_path: Path | str) -> None:
    """Save rules to a YAML file.

    Args:
        rules: Rules to save.
        yaml_path: Path to the YAML file.
    """
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    data = {"rules": [rule.to_dict() for rule in rules]}

    yaml_path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
