"""Document structure, the ``jsonapi`` object."""

from jsonapi_lint.functions import falsy, schema
from jsonapi_lint.rules.schemas import Rule, Then

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-jsonapi-object"

JSONAPI_OBJECT_SCHEMA = {
    "type": "object",
    "required": ["properties", "type", "additionalProperties"],
    "properties": {
        "type": {"type": "string", "enum": ["object"]},
        "properties": {
            "type": "object",
            "properties": {
                "version": {
                    "type": "object",
                    "required": ["type"],
                    "properties": {
                        "type": {"type": "string", "enum": ["string"]},
                    },
                },
                "meta": {
                    "type": "object",
                    "required": ["type"],
                    "properties": {
                        "type": {"type": "string", "enum": ["object"]},
                        "additionalProperties": {"type": "boolean"},
                    },
                },
            },
        },
    },
}

RULES = [
    Rule(
        id="jsonapi-object-schema",
        description="jsonapi object must match schema",
        given="$..properties.jsonapi",
        then=[
            Then(schema, {"schema": JSONAPI_OBJECT_SCHEMA}),
            Then(falsy, field="additionalProperties"),
        ],
    ),
]
