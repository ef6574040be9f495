"""Document structure, resource object identification."""

from jsonapi_lint.functions import enumeration, truthy
from jsonapi_lint.rules.schemas import Rule, Then
from jsonapi_lint.rulesets.common import jsonapi_schema

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-resource-object-identification"

SINGLE = ".properties.data.properties"
ARRAY = ".properties.data.items.properties"


def _identified(suffix: str) -> list[str]:
    """Every response, plus the request bodies of PUT and PATCH."""
    return [
        jsonapi_schema(suffix, containers=("responses",)),
        jsonapi_schema(suffix, methods=("put", "patch"), containers=("requestBody",)),
    ]


RULES = [
    Rule(
        id="document-structure-resource-single-identification-id-member",
        description="A single `Resource Object` MUST contain an `id` member",
        given=_identified(SINGLE),
        then=Then(truthy, field="id"),
    ),
    Rule(
        id="document-structure-resource-single-identification-id-type",
        description="A single `Resource Object` `id` member MUST be of type `string`",
        given=_identified(f"{SINGLE}.id"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-single-identification-type-member",
        description="A single `Resource Object` MUST contain an `type` member",
        given=jsonapi_schema(SINGLE),
        then=Then(truthy, field="type"),
    ),
    Rule(
        id="document-structure-resource-single-identification-type-type",
        description="A single `Resource Object` `type` member MUST be of type `string`",
        given=jsonapi_schema(f"{SINGLE}.type"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-array-identification-id-member",
        description="An array of `Resource Objects` MUST contain an `id` member",
        given=_identified(ARRAY),
        then=Then(truthy, field="id"),
    ),
    Rule(
        id="document-structure-resource-array-identification-id-type",
        description="An array of `Resource Objects` `id` member MUST be of type `string`",
        given=_identified(f"{ARRAY}.id"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-array-identification-type-member",
        description="An array of `Resource Objects` MUST contain an `type` member",
        given=jsonapi_schema(ARRAY),
        then=Then(truthy, field="type"),
    ),
    Rule(
        id="document-structure-resource-array-identification-type-type",
        description="An array of `Resource Objects` `type` member MUST be of type `string`",
        given=jsonapi_schema(f"{ARRAY}.type"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
]
