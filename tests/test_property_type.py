"""Tests for the property type validator."""

from __future__ import annotations

from typing import Any

import pytest

from jsonapi_lint.functions import validate_property_type
from jsonapi_lint.rules.engine import RulesEngine
from jsonapi_lint.rules.functions import FunctionContext
from jsonapi_lint.rules.schemas import InvalidFunctionOptionsError, Then

OPTIONS = {"propertyName": "errors", "propertyType": "array"}


@pytest.fixture
def context() -> FunctionContext:
    """Context pointing at a schema's properties object."""
    return FunctionContext(path=["components", "schemas", "JsonApiError", "properties"])


class TestValidatePropertyType:
    """Tests for validate_property_type."""

    def test_absent_property_passes(self, context: FunctionContext) -> None:
        """Test that a missing property is not applicable."""
        target = {"data": {"type": "object"}}

        assert validate_property_type(target, OPTIONS, context) is None

    def test_empty_object_passes(self, context: FunctionContext) -> None:
        """Test that an empty properties object passes."""
        assert validate_property_type({}, OPTIONS, context) is None

    def test_matching_type_passes(self, context: FunctionContext) -> None:
        """Test that the expected type passes."""
        target = {"errors": {"type": "array", "items": {"type": "object"}}}

        assert validate_property_type(target, OPTIONS, context) is None

    def test_differing_type_fails(self, context: FunctionContext) -> None:
        """Test that a different type is reported with both types named."""
        target = {"errors": {"type": "object"}}

        results = validate_property_type(target, OPTIONS, context)

        assert results == [
            {"message": 'Property "errors" should be of type array, found type "object" instead.'}
        ]

    def test_missing_type_fails(self, context: FunctionContext) -> None:
        """Test that a property without a type is reported as undefined."""
        target = {"errors": {"items": {"type": "object"}}}

        results = validate_property_type(target, OPTIONS, context)

        assert len(results) == 1
        assert 'found type "undefined" instead' in results[0]["message"]

    @pytest.mark.parametrize("value", [None, "array", ["array"]])
    def test_non_mapping_property_fails(self, context: FunctionContext, value: Any) -> None:
        """Test that a property that is not a schema object is reported."""
        results = validate_property_type({"errors": value}, OPTIONS, context)

        assert len(results) == 1
        assert 'found type "undefined" instead' in results[0]["message"]

    def test_non_object_input_is_skipped(self, context: FunctionContext) -> None:
        """Test that input outside the input schema is not evaluated."""
        assert validate_property_type(["errors"], OPTIONS, context) is None
        assert validate_property_type("errors", OPTIONS, context) is None

    def test_does_not_modify_target(self, context: FunctionContext) -> None:
        """Test that the target is left untouched."""
        target = {"errors": {"type": "object"}}

        validate_property_type(target, OPTIONS, context)

        assert target == {"errors": {"type": "object"}}


class TestValidatePropertyTypeOptions:
    """Tests for options validation of validate_property_type."""

    def test_valid_options(self) -> None:
        """Test that both options are accepted."""
        then = Then(validate_property_type, OPTIONS)

        assert then.function_options == OPTIONS

    @pytest.mark.parametrize(
        "options",
        [
            None,
            {},
            {"propertyName": "errors"},
            {"propertyType": "array"},
            {"propertyName": 1, "propertyType": "array"},
        ],
    )
    def test_invalid_options_rejected(self, options: Any) -> None:
        """Test that incomplete or mistyped options fail when the rule is built."""
        with pytest.raises(InvalidFunctionOptionsError):
            Then(validate_property_type, options)


class TestArrayStructureRule:
    """Tests for the rule built on validate_property_type."""

    def test_valid_document_passes(self, engine: RulesEngine, valid_document: dict[str, Any]) -> None:
        """Test that an errors array passes."""
        assert engine.results_for(valid_document, "errors-error-objects-array-structure") == []

    def test_errors_object_reported(self, engine: RulesEngine, valid_document: dict[str, Any]) -> None:
        """Test that an errors member declared as an object is reported."""
        errors = valid_document["components"]["schemas"]["JsonApiError"]["properties"]["errors"]
        errors["type"] = "object"

        results = engine.results_for(valid_document, "errors-error-objects-array-structure")

        assert results
        assert all(
            result.message.endswith(
                'Property "errors" should be of type array, found type "object" instead.'
            )
            for result in results
        )
        assert results[0].path[:4] == ["paths", "/users", "get", "responses"]
