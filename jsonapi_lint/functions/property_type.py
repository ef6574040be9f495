"""Check the declared schema ``type`` of a named property."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonapi_lint.rules.functions import FunctionContext, FunctionResult, print_value, ruleset_function
from jsonapi_lint.rules.schemas import MISSING

OPTIONS_SCHEMA = {
    "type": "object",
    "properties": {
        "propertyName": {
            "type": "string",
            "description": "The name of the property to check.",
        },
        "propertyType": {
            "type": "string",
            "description": "The expected type of the property.",
        },
    },
    "required": ["propertyName", "propertyType"],
}


@ruleset_function(input_schema={"type": "object"}, options_schema=OPTIONS_SCHEMA)
def validate_property_type(
    target: dict[str, Any], options: dict[str, str], context: FunctionContext
) -> FunctionResult | None:
    """Validate the type of a property within a schema ``properties`` object.

    An absent property is not applicable and passes. A property whose value
    has no ``type`` (or is not a mapping at all) is reported as
    ``undefined``.

    Args:
        target: Mapping of property names to schema objects.
        options: ``propertyName`` and ``propertyType``.
        context: Function context.

    Returns:
        One result when the type differs, None otherwise.
    """
    name = options["propertyName"]
    expected = options["propertyType"]

    if name not in target:
        return None

    value = target[name]
    actual = value.get("type", MISSING) if isinstance(value, Mapping) else MISSING
    if actual == expected:
        return None

    message = f'Property "{name}" should be of type {expected}, found type "{print_value(actual)}" instead.'
    context.logger.debug("%s: %s", context.path_string, message)
    return [{"message": message}]
