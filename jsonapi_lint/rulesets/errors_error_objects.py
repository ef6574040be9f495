"""Errors, error objects.

Every rule here starts from the responses of an operation whose status code
lies between 400 and 599 and inspects the schema of the ``errors`` array.
"""

from jsonapi_lint.functions import enumeration, length, schema, validate_property_type
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Selector, Then
from jsonapi_lint.rulesets.common import JSONAPI_MEDIA_TYPE, error_responses

DOCUMENTATION_URL = "https://jsonapi.org/format/#error-objects"

ERROR_SCHEMA_REF = "#/components/schemas/JsonApiError"

ERROR_OBJECT_MEMBERS = ["id", "links", "status", "code", "title", "detail", "source", "meta"]

# Schema of a links member such as ``about``: a string holding a URI
LINK_MEMBER_SCHEMA = {
    "type": "object",
    "required": ["type"],
    "properties": {
        "type": {"const": "string"},
        "format": {"const": "uri"},
    },
}


def _error_item(suffix: str = "") -> Selector:
    return error_responses(f"..errors.items{suffix}")


def _declared_type(expected: str) -> Then:
    """Require the ``type`` keyword of the matched schema to equal ``expected``."""
    return Then(schema, {"schema": {"const": expected}}, field="type")


RULES = [
    Rule(
        id="errors-error-objects-4xx-5xx-responses",
        description="Ensure JsonApiError schema is used only in responses with status codes 400-599",
        given=error_responses(),
        then=Then(
            schema,
            {"schema": {"type": "string", "pattern": f"^{ERROR_SCHEMA_REF}$"}},
            field=("content", JSONAPI_MEDIA_TYPE, "schema", "$ref"),
        ),
        resolved=False,
    ),
    Rule(
        id="errors-error-objects-array-structure",
        description="Error objects must be returned in an array under `errors` key.",
        message="{{path}} - {{error}}",
        given=error_responses("..properties"),
        then=Then(validate_property_type, {"propertyName": "errors", "propertyType": "array"}),
    ),
    Rule(
        id="errors-error-objects-object-structure",
        description="Error objects must only contain the specified members.",
        given=_error_item(".properties"),
        then=Then(enumeration, {"values": ERROR_OBJECT_MEMBERS}, field=KEY_FIELD),
    ),
    Rule(
        id="errors-error-objects-object-structure-length",
        description="Error objects must only contain the specified members.",
        given=_error_item(),
        then=Then(length, {"min": 1, "max": 8}, field="properties"),
    ),
    Rule(
        id="errors-error-objects-items-id-type",
        description='Id member in "errors" array must by of type "string".',
        given=_error_item(".properties.id"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-links-type",
        description='Links member in "errors" array must by of type "object".',
        given=_error_item(".properties.links"),
        then=_declared_type("object"),
    ),
    Rule(
        id="errors-error-objects-items-links",
        description='Links object may contain one of the following members: "about" and/or "type".',
        given=_error_item(".properties.links.properties"),
        then=Then(enumeration, {"values": ["about", "type"]}, field=KEY_FIELD),
    ),
    Rule(
        id="errors-error-objects-items-links-structure-length",
        description="Links objects must only contain the specified members.",
        given=_error_item(".properties.links"),
        then=Then(length, {"min": 1, "max": 2}, field="properties"),
    ),
    Rule(
        id="errors-error-objects-items-links-about-type",
        description='About member in the Links object must be of type "string" in the format of an "URI".',
        given=_error_item(".properties.links.properties.about"),
        then=Then(schema, {"schema": LINK_MEMBER_SCHEMA}),
    ),
    Rule(
        id="errors-error-objects-items-links-type-type",
        description='Type member in the Links object must be of type "string" in the format of an "URI".',
        given=_error_item(".properties.links.properties.type"),
        then=Then(schema, {"schema": LINK_MEMBER_SCHEMA}),
    ),
    Rule(
        id="errors-error-objects-items-status-type",
        description='Status member in "errors" array must by of type "string".',
        given=_error_item(".properties.status"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-code-type",
        description='code member in "errors" array must by of type "string".',
        given=_error_item(".properties.code"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-title-type",
        description='title member in "errors" array must by of type "string".',
        given=_error_item(".properties.title"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-detail-type",
        description='detail member in "errors" array must by of type "string".',
        given=_error_item(".properties.detail"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-source-type",
        description='Source member in "errors" array must by of type "object".',
        given=_error_item(".properties.source"),
        then=_declared_type("object"),
    ),
    Rule(
        id="errors-error-objects-items-source",
        description=(
            'Source object SHOULD contain one of the following members: "pointer", '
            '"parameter" and/or "header".'
        ),
        given=_error_item(".properties.source.properties"),
        then=Then(enumeration, {"values": ["pointer", "parameter", "header"]}, field=KEY_FIELD),
    ),
    Rule(
        id="errors-error-objects-items-source-pointer-type",
        description='Pointer member in the Source object must be of type "string".',
        given=_error_item(".properties.source.properties.pointer"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-source-parameter-type",
        description='Parameter member in the Source object must be of type "string".',
        given=_error_item(".properties.source.properties.parameter"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-source-header-type",
        description='Header member in the Source object must be of type "string".',
        given=_error_item(".properties.source.properties.header"),
        then=_declared_type("string"),
    ),
    Rule(
        id="errors-error-objects-items-source-structure-length",
        description="Source objects must only contain the specified members.",
        given=_error_item(".properties.source"),
        then=Then(length, {"min": 1, "max": 3}, field="properties"),
    ),
    Rule(
        id="errors-error-objects-items-meta-type",
        description='Meta member in "errors" array must by of type "object".',
        given=_error_item(".properties.meta"),
        then=_declared_type("object"),
    ),
]
