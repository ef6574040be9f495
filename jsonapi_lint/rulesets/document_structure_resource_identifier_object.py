"""Document structure, resource identifier objects in relationships."""

from jsonapi_lint.functions import enumeration, schema, truthy
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-resource-identifier-objects"

# ``required`` of a resource identifier object lists both id and type
REQUIRED_IDENTIFIER_MEMBERS = {
    "type": "array",
    "allOf": [
        {"contains": {"const": "id"}},
        {"contains": {"const": "type"}},
    ],
}

RULES = [
    Rule(
        id="relationships-data",
        description=(
            "'relationships..data' properties MUST be an object or an array of objects "
            "with a min schema "
        ),
        given="$..relationships..properties.data",
        then=[
            Then(enumeration, {"values": ["object", "array"]}, field="type"),
            Then(truthy, field="required"),
            Then(
                schema,
                {"schema": REQUIRED_IDENTIFIER_MEMBERS, "allowUndefined": True},
                field="required",
            ),
        ],
    ),
    Rule(
        id="relationships-data-allow-meta",
        description=(
            "Resource Identifier Objects MUST have id and type fields with an "
            "optional meta object"
        ),
        given="$..relationships..properties.data..properties",
        then=Then(enumeration, {"values": ["id", "type", "meta"]}, field=KEY_FIELD),
    ),
]
