"""General purpose functions shared by most rules.

Truthiness follows the JavaScript rules the rule definitions were written
against: ``None``, ``False``, ``0``, ``""``, NaN and a missing value are falsy,
while empty mappings and lists are truthy.
"""

from __future__ import annotations

import json
import math
import re
from functools import lru_cache
from typing import Any

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.validators import validator_for

from jsonapi_lint.rules.functions import FunctionContext, FunctionResult, print_value, ruleset_function
from jsonapi_lint.rules.schemas import MISSING

REGEX_LITERAL = re.compile(r"^/(.+)/([a-z]*)$", re.DOTALL)

REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


def is_truthy(value: Any) -> bool:
    """Check a value for truthiness the way the rule definitions expect."""
    if value is MISSING or value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def _label(context: FunctionContext) -> str:
    """Describe the target for a message, e.g. '"version" property'."""
    if not context.path:
        return "Value"
    return f'"{context.path[-1]}" property'


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a bare regex or a ``/regex/flags`` literal."""
    literal = REGEX_LITERAL.match(pattern)
    if literal is None:
        return re.compile(pattern)

    flags = 0
    for flag in literal.group(2):
        flags |= REGEX_FLAGS.get(flag, 0)
    return re.compile(literal.group(1), flags)


@ruleset_function()
def truthy(target: Any, options: Any, context: FunctionContext) -> FunctionResult | None:
    """Fail when the target is falsy."""
    if is_truthy(target):
        return None
    return [{"message": f"{_label(context)} must be truthy"}]


@ruleset_function()
def falsy(target: Any, options: Any, context: FunctionContext) -> FunctionResult | None:
    """Fail when the target is truthy."""
    if not is_truthy(target):
        return None
    return [{"message": f"{_label(context)} must be falsy"}]


@ruleset_function(
    input_schema={"type": ["string", "number", "null", "boolean"]},
    options_schema={
        "type": "object",
        "properties": {
            "values": {
                "type": "array",
                "items": {"type": ["string", "number", "null", "boolean"]},
            },
        },
        "required": ["values"],
        "additionalProperties": False,
    },
)
def enumeration(target: Any, options: dict[str, Any], context: FunctionContext) -> FunctionResult | None:
    """Fail when the target is not one of ``values``."""
    values = options["values"]
    for allowed in values:
        if target == allowed and isinstance(target, bool) == isinstance(allowed, bool):
            return None

    allowed_values = ", ".join(json.dumps(value) for value in values)
    return [
        {
            "message": (
                f'"{print_value(target)}" must be equal to one of the allowed values: '
                f"{allowed_values}"
            )
        }
    ]


@ruleset_function(
    input_schema={"type": "string"},
    options_schema={
        "type": "object",
        "properties": {
            "match": {"type": "string", "format": "regex"},
            "notMatch": {"type": "string", "format": "regex"},
        },
        "anyOf": [{"required": ["match"]}, {"required": ["notMatch"]}],
        "additionalProperties": False,
    },
)
def pattern(target: str, options: dict[str, str], context: FunctionContext) -> FunctionResult | None:
    """Fail when the target does not match ``match`` or matches ``notMatch``."""
    errors: FunctionResult = []

    if "match" in options and not compile_pattern(options["match"]).search(target):
        errors.append({"message": f'"{target}" must match the pattern "{options["match"]}"'})

    if "notMatch" in options and compile_pattern(options["notMatch"]).search(target):
        errors.append(
            {"message": f'"{target}" must not match the pattern "{options["notMatch"]}"'}
        )

    return errors or None


@ruleset_function(
    input_schema={"type": ["array", "object", "string", "number"]},
    options_schema={
        "type": "object",
        "properties": {
            "min": {"type": "number"},
            "max": {"type": "number"},
        },
        "anyOf": [{"required": ["min"]}, {"required": ["max"]}],
        "additionalProperties": False,
    },
)
def length(target: Any, options: dict[str, float], context: FunctionContext) -> FunctionResult | None:
    """Fail when the size of the target is outside ``min``/``max``.

    Strings and lists are measured by length, mappings by their number of
    members and numbers by their value.
    """
    if isinstance(target, (int, float)):
        size = target
    else:
        size = len(target)

    errors: FunctionResult = []
    if "min" in options and size < options["min"]:
        errors.append({"message": f"{_label(context)} must not be shorter than {options['min']}"})
    if "max" in options and size > options["max"]:
        errors.append({"message": f"{_label(context)} must not be longer than {options['max']}"})
    return errors or None


@ruleset_function(
    options_schema={
        "type": "object",
        "properties": {
            "schema": {"type": ["object", "boolean"]},
            "allowUndefined": {"type": "boolean"},
        },
        "required": ["schema"],
        "additionalProperties": False,
    },
)
def schema(target: Any, options: dict[str, Any], context: FunctionContext) -> FunctionResult | None:
    """Validate the target against a JSON Schema.

    The draft is taken from the schema's ``$schema`` keyword and defaults to
    draft 7. Each validation error becomes one result pointing at the
    offending location below the target.
    """
    if target is MISSING:
        if options.get("allowUndefined", False):
            return None
        return [{"message": f"{_label(context)} must exist"}]

    json_schema = options["schema"]
    validator_class = validator_for(json_schema, default=Draft7Validator)
    validator = validator_class(json_schema, format_checker=FormatChecker())

    errors = sorted(validator.iter_errors(target), key=lambda error: [str(p) for p in error.absolute_path])
    return [
        {
            "message": error.message,
            "path": [*context.path, *error.absolute_path],
        }
        for error in errors
    ] or None
