"""Document structure, resource object attributes."""

from jsonapi_lint.functions import enumeration, falsy, pattern
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then
from jsonapi_lint.rulesets.common import jsonapi_schema

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-resource-object-attributes"

FOREIGN_KEY_PATTERN = ".*_id$"

SINGLE_ATTRIBUTES = ".properties.data.properties.attributes"
ARRAY_ATTRIBUTES = ".properties.data.items.properties.attributes"

RULES = [
    Rule(
        id="document-structure-resource-single-attributes-type",
        description="`attributes` member in a single `Resource Object` MUST be of type `object`",
        given=jsonapi_schema(SINGLE_ATTRIBUTES),
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-single-attributes-no-foreign-keys",
        description="`attributes` member in a single `Resource Object` SHOULD NOT contain any foreign keys",
        given=jsonapi_schema(f"{SINGLE_ATTRIBUTES}.properties"),
        then=Then(pattern, {"notMatch": FOREIGN_KEY_PATTERN}, field=KEY_FIELD),
    ),
    Rule(
        id="document-structure-resource-single-attributes-no-relationships-member",
        description="`attributes` member in a single `Resource Object` MUST NOT contain a `relationships` member",
        given=jsonapi_schema(f"{SINGLE_ATTRIBUTES}..relationships"),
        then=Then(falsy),
    ),
    Rule(
        id="document-structure-resource-single-attributes-no-links-member",
        description="`attributes` member in a single `Resource Object` MUST NOT contain a `links` member",
        given=jsonapi_schema(f"{SINGLE_ATTRIBUTES}..links"),
        then=Then(falsy),
    ),
    Rule(
        id="document-structure-resource-array-attributes-type",
        description="`attributes` member in an array of `Resource Objects` MUST be of type `object`",
        given=jsonapi_schema(ARRAY_ATTRIBUTES),
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-array-attributes-no-foreign-keys",
        description="`attributes` member in an array of `Resource Objects` SHOULD NOT contain any foreign keys",
        given=jsonapi_schema(f"{ARRAY_ATTRIBUTES}.properties"),
        then=Then(pattern, {"notMatch": FOREIGN_KEY_PATTERN}, field=KEY_FIELD),
    ),
    Rule(
        id="document-structure-resource-array-attributes-no-relationships-member",
        description="`attributes` member in an array of `Resource Objects` MUST NOT contain a `relationships` member",
        given=jsonapi_schema(f"{ARRAY_ATTRIBUTES}..relationships"),
        then=Then(falsy),
    ),
    Rule(
        id="document-structure-resource-array-attributes-no-links-member",
        description="`attributes` member in an array of `Resource Objects` MUST NOT contain a `links` member",
        given=jsonapi_schema(f"{ARRAY_ATTRIBUTES}..links"),
        then=Then(falsy),
    ),
]
