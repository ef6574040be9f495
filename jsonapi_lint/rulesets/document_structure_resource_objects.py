"""Document structure, resource objects.

Single resource documents describe ``data`` as an object schema, collections
as an array schema whose ``items`` describe each resource object. Both shapes
are checked for the same members.

``id`` is only required for GET, DELETE, PUT and PATCH. A POST request
creates a resource whose id is usually assigned by the server, so its body
may leave ``id`` out.
"""

from jsonapi_lint.functions import enumeration, length, truthy
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then
from jsonapi_lint.rulesets.common import IDENTIFIED_METHODS, jsonapi_schema

DOCUMENTATION_URL = "https://jsonapi.org/format/#document-resource-objects"

RESOURCE_OBJECT_MEMBERS = ["id", "type", "attributes", "relationships", "links", "meta"]

SINGLE = ".properties.data"
ARRAY = ".properties.data.items"

RULES = [
    Rule(
        id="document-structure-resource-objects-type",
        description="A `Resource Object` MUST be of type `object` or `array`",
        given=jsonapi_schema(SINGLE),
        then=Then(enumeration, {"values": ["object", "array"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-single-structure",
        description="A single `Resource Object` MUST only contain the specified members",
        given=jsonapi_schema(f"{SINGLE}.properties"),
        then=Then(enumeration, {"values": RESOURCE_OBJECT_MEMBERS}, field=KEY_FIELD),
    ),
    Rule(
        id="document-structure-resource-objects-single-structure-length",
        description="A single `Resource Object` MAY contain between two or six specified members",
        given=jsonapi_schema(SINGLE),
        then=Then(length, {"min": 2, "max": 6}, field="properties"),
    ),
    Rule(
        id="document-structure-resource-objects-single-type-required",
        description="A single `Resource Object` MUST contain `type` member",
        given=jsonapi_schema(f"{SINGLE}.properties"),
        then=Then(truthy, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-single-id-required",
        description=(
            "A single `Resource Object` MUST contain `id` member for HTTP methods: "
            "GET, DELETE, PUT, PATCH"
        ),
        given=jsonapi_schema(f"{SINGLE}.properties", methods=IDENTIFIED_METHODS),
        then=Then(truthy, field="id"),
    ),
    Rule(
        id="document-structure-resource-objects-single-id-type",
        description="`id` member in a single `Resource Object` MUST be of type `string`",
        given=jsonapi_schema(f"{SINGLE}.properties.id"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-single-type-type",
        description="`type` member in a single `Resource Object` MUST be of type `string`",
        given=jsonapi_schema(f"{SINGLE}.properties.type"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-single-attributes-type",
        description="`attributes` member in a single `Resource Object` MUST be of type `object`",
        given=jsonapi_schema(f"{SINGLE}.properties.attributes"),
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-array-required-fields",
        description="An array of `Resource Objects` MUST contain `id` and `type` members",
        given=jsonapi_schema(f"{ARRAY}.properties", methods=IDENTIFIED_METHODS),
        then=[
            Then(truthy, field="id"),
            Then(truthy, field="type"),
        ],
    ),
    Rule(
        id="document-structure-resource-objects-array-structure",
        description="An array of `Resource Objects` MUST only contain the specified members",
        given=jsonapi_schema(f"{ARRAY}.properties"),
        then=Then(enumeration, {"values": RESOURCE_OBJECT_MEMBERS}, field=KEY_FIELD),
    ),
    Rule(
        id="document-structure-resource-objects-array-structure-length",
        description="An array of `Resource Objects` MAY contain between two or six specified members",
        given=jsonapi_schema(ARRAY),
        then=Then(length, {"min": 2, "max": 6}, field="properties"),
    ),
    Rule(
        id="document-structure-resource-objects-array-type-required",
        description="An array of `Resource Objects` MUST contain `type` member",
        given=jsonapi_schema(f"{ARRAY}.properties"),
        then=Then(truthy, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-array-id-required",
        description=(
            "An array of `Resource Objects` MUST contain `id` member for HTTP methods: "
            "GET, DELETE, PUT, PATCH"
        ),
        given=jsonapi_schema(f"{ARRAY}.properties", methods=IDENTIFIED_METHODS),
        then=Then(truthy, field="id"),
    ),
    Rule(
        id="document-structure-resource-objects-array-id-type",
        description="`id` member in an array of `Resource Objects` MUST be of type `string`",
        given=jsonapi_schema(f"{ARRAY}.properties.id"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-array-type-type",
        description="`type` member in an array of `Resource Objects` MUST be of type `string`",
        given=jsonapi_schema(f"{ARRAY}.properties.type"),
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
    Rule(
        id="document-structure-resource-objects-array-attributes-type",
        description="`attributes` member in an array of `Resource Objects` MUST be of type `object`",
        given=jsonapi_schema(f"{ARRAY}.properties.attributes"),
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
]
