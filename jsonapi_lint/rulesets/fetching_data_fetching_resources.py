"""Fetching data, links that let clients fetch resources."""

from jsonapi_lint.functions import truthy
from jsonapi_lint.rules.schemas import Rule, Then
from jsonapi_lint.rulesets.common import response_schema

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#fetching-resources"

RULES = [
    Rule(
        id="fetching-data-fetching-resources-top-level-links",
        description="Ensure top-level responses include a `self` link in a `links` object",
        given=response_schema(".properties.links.properties"),
        then=Then(truthy, field="self"),
    ),
    Rule(
        id="fetching-data-fetching-resources-single-level-self-link",
        description="Ensure single resource object responses include a `self` link in a `links` object",
        given=response_schema(".properties.data.properties.links.properties"),
        then=Then(truthy, field="self"),
    ),
    Rule(
        id="fetching-data-fetching-resources-single-relationship-level-related-link",
        description="Ensure relationship objects in responses include a `related` link",
        given=response_schema(
            ".properties.data.properties.relationships.properties.*.properties.links.properties"
        ),
        then=Then(truthy, field="related"),
    ),
    Rule(
        id="fetching-data-fetching-resources-array-level-self-link",
        description="Ensure each resource object in array responses includes a `self` link in a `links` object",
        given=response_schema(".properties.data.items.properties.links.properties"),
        then=Then(truthy, field="self"),
    ),
    Rule(
        id="fetching-data-fetching-resources-array-relationship-level-related-link",
        description="Ensure relationship objects in each resource in array responses include a `related` link",
        given=response_schema(
            ".properties.data.items.properties.relationships.properties.*.properties.links.properties"
        ),
        then=Then(truthy, field="related"),
    ),
]
