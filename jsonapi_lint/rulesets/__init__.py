"""Bundled JSON:API rule groups.

Each group module mirrors one section of the JSON:API 1.0 specification and
exposes ``DOCUMENTATION_URL`` and ``RULES``.
"""

from __future__ import annotations

from types import ModuleType

from jsonapi_lint.rules.schemas import Ruleset
from jsonapi_lint.rulesets import (
    content_negotiation_clients,
    content_negotiation_servers,
    document_structure_jsonapi_object,
    document_structure_links,
    document_structure_meta_information,
    document_structure_resource_attributes,
    document_structure_resource_fields,
    document_structure_resource_identification,
    document_structure_resource_identifier_object,
    document_structure_resource_objects,
    document_structure_top_level,
    errors_error_objects,
    errors_processing_error,
    errors_processing_errors,
    fetching_data_fetching_resources,
    member_names,
)

RULESETS: dict[str, ModuleType] = {
    "content-negotiation-clients": content_negotiation_clients,
    "content-negotiation-servers": content_negotiation_servers,
    "document-structure-top-level": document_structure_top_level,
    "document-structure-jsonapi-object": document_structure_jsonapi_object,
    "document-structure-links": document_structure_links,
    "document-structure-meta-information": document_structure_meta_information,
    "member-names": member_names,
    "document-structure-resource-objects": document_structure_resource_objects,
    "document-structure-resource-attributes": document_structure_resource_attributes,
    "document-structure-resource-fields": document_structure_resource_fields,
    "document-structure-resource-identification": document_structure_resource_identification,
    "document-structure-resource-identifier-object": document_structure_resource_identifier_object,
    "errors-error-objects": errors_error_objects,
    "errors-processing-errors": errors_processing_errors,
    "errors-processing-error": errors_processing_error,
    "fetching-data-fetching-resources": fetching_data_fetching_resources,
}


def get_ruleset(name: str) -> Ruleset:
    """Get a single rule group.

    Args:
        name: Group name, e.g. "errors-error-objects".

    Returns:
        A new Ruleset holding the group's rules.

    Raises:
        ValueError: If no group has that name.
    """
    module = RULESETS.get(name)
    if module is None:
        raise ValueError(f"Unknown ruleset: {name}. Available: {list(RULESETS.keys())}")
    return Ruleset.from_rules(name, module.RULES, documentation_url=module.DOCUMENTATION_URL)


def bundle(names: list[str] | None = None) -> Ruleset:
    """Merge rule groups into one ruleset.

    Args:
        names: Groups to include; all of them when None.

    Returns:
        The merged ruleset.

    Raises:
        ValueError: If a group name is unknown.
        DuplicateRuleError: If two groups define the same rule id.
    """
    ruleset = Ruleset(name="jsonapi")
    for name in names or RULESETS:
        ruleset.extend(get_ruleset(name))
    return ruleset


__all__ = ["RULESETS", "bundle", "get_ruleset"]
