"""Document structure, resource object fields.

``id`` and ``type`` share a namespace with attributes and relationships, so
neither may be used as an attribute or relationship name.
"""

from jsonapi_lint.functions import falsy
from jsonapi_lint.rules.schemas import Rule, Then
from jsonapi_lint.rulesets.common import jsonapi_schema

DOCUMENTATION_URL = "https://jsonapi.org/format/#document-resource-object-fields"

ARRAY_ATTRIBUTE_NAMES = ".properties.data.items.properties.attributes.properties"
ARRAY_RELATIONSHIP_NAMES = ".properties.data.items.properties.relationships.properties"

RULES = [
    Rule(
        id="document-structure-resource-array-attributes-no-id-name",
        description="`attributes` name in an array of `Resource Objects` MUST NOT contain a `id` name",
        given=jsonapi_schema(ARRAY_ATTRIBUTE_NAMES),
        then=Then(falsy, field="id"),
    ),
    Rule(
        id="document-structure-resource-array-attributes-no-type-name",
        description="`attributes` name in an array of `Resource Objects` MUST NOT contain a `type` name",
        given=jsonapi_schema(ARRAY_ATTRIBUTE_NAMES),
        then=Then(falsy, field="type"),
    ),
    Rule(
        id="document-structure-resource-array-relationships-no-id-name",
        description="`relationship` name in an array of `Resource Objects` MUST NOT contain a `id` name",
        given=jsonapi_schema(ARRAY_RELATIONSHIP_NAMES),
        then=Then(falsy, field="id"),
    ),
    Rule(
        id="document-structure-resource-array-relationships-no-type-name",
        description="`relationship` name in an array of `Resource Objects` MUST NOT contain a `type` name",
        given=jsonapi_schema(ARRAY_RELATIONSHIP_NAMES),
        then=Then(falsy, field="type"),
    ),
]
