"""Rules system for linting OpenAPI documents."""

from jsonapi_lint.rules.schemas import (
    KEY_FIELD,
    MISSING,
    ConfigError,
    DuplicateRuleError,
    InvalidFunctionOptionsError,
    LintResult,
    Rule,
    RuleExecutionError,
    RulesetError,
    RuleSeverity,
    Ruleset,
    Selector,
    Then,
    UnknownFunctionError,
)
from jsonapi_lint.rules.functions import (
    FUNCTIONS,
    FunctionContext,
    RulesetFunction,
    get_function,
    ruleset_function,
)
from jsonapi_lint.rules.selectors import KeyRange, find
from jsonapi_lint.rules.engine import RulesEngine, load_rules_from_yaml, save_rules_to_yaml
from jsonapi_lint.rules.config import CONFIG_FILENAME, LintConfig, load_config, save_config

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DuplicateRuleError",
    "FUNCTIONS",
    "FunctionContext",
    "InvalidFunctionOptionsError",
    "KEY_FIELD",
    "KeyRange",
    "LintConfig",
    "LintResult",
    "MISSING",
    "Rule",
    "RuleExecutionError",
    "RuleSeverity",
    "Ruleset",
    "RulesEngine",
    "RulesetError",
    "RulesetFunction",
    "Selector",
    "Then",
    "UnknownFunctionError",
    "find",
    "get_function",
    "load_config",
    "load_rules_from_yaml",
    "ruleset_function",
    "save_config",
    "save_rules_to_yaml",
]
