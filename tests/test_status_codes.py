"""Tests for the status code counting functions."""

from __future__ import annotations

from typing import Any

import pytest

from jsonapi_lint.functions import no_multiple_4xx_status_codes, no_multiple_5xx_status_codes
from jsonapi_lint.functions.status_codes import (
    MULTIPLE_4XX_MESSAGE,
    MULTIPLE_5XX_MESSAGE,
    count_status_class,
)
from jsonapi_lint.rules.engine import RulesEngine
from jsonapi_lint.rules.functions import FunctionContext

RESPONSES_PATH = ["paths", "/users", "get", "responses"]


@pytest.fixture
def context() -> FunctionContext:
    """Context pointing at a responses object."""
    return FunctionContext(path=list(RESPONSES_PATH))


class TestCountStatusClass:
    """Tests for counting status codes of one class."""

    def test_counts_matching_keys(self) -> None:
        """Test that only keys with the leading digit are counted."""
        responses = {"200": {}, "400": {}, "404": {}, "500": {}}

        assert count_status_class(responses, "4") == 2
        assert count_status_class(responses, "5") == 1
        assert count_status_class(responses, "2") == 1

    def test_counts_range_keys(self) -> None:
        """Test that range codes such as 4XX count towards their class."""
        assert count_status_class({"4XX": {}, "404": {}}, "4") == 2

    def test_empty_responses(self) -> None:
        """Test that an empty object has no status codes."""
        assert count_status_class({}, "4") == 0

    @pytest.mark.parametrize("responses", [None, "400", ["400", "404"], 404])
    def test_non_mapping_input(self, responses: Any) -> None:
        """Test that anything but a mapping has no status codes."""
        assert count_status_class(responses, "4") == 0


class TestNoMultiple4xxStatusCodes:
    """Tests for the 4xx counter."""

    def test_single_4xx_passes(self, context: FunctionContext) -> None:
        """Test that one 4xx code is allowed."""
        assert no_multiple_4xx_status_codes({"400": {}, "200": {}}, None, context) == []

    def test_multiple_4xx_fails(self, context: FunctionContext) -> None:
        """Test that two 4xx codes produce one result at the responses path."""
        results = no_multiple_4xx_status_codes({"400": {}, "404": {}}, None, context)

        assert results == [{"message": MULTIPLE_4XX_MESSAGE, "path": RESPONSES_PATH}]

    def test_many_4xx_still_one_result(self, context: FunctionContext) -> None:
        """Test that the result is reported once however many codes there are."""
        responses = {"400": {}, "401": {}, "403": {}, "404": {}}

        assert len(no_multiple_4xx_status_codes(responses, None, context)) == 1

    def test_5xx_codes_are_ignored(self, context: FunctionContext) -> None:
        """Test that server error codes do not count as 4xx."""
        assert no_multiple_4xx_status_codes({"500": {}, "503": {}}, None, context) == []

    def test_empty_and_invalid_input(self, context: FunctionContext) -> None:
        """Test that empty or non-mapping input passes."""
        assert no_multiple_4xx_status_codes({}, None, context) == []
        assert no_multiple_4xx_status_codes(None, None, context) == []
        assert no_multiple_4xx_status_codes("400", None, context) == []

    def test_repeated_calls_are_identical(self, context: FunctionContext) -> None:
        """Test that the function keeps no state between calls."""
        responses = {"400": {}, "404": {}}

        first = no_multiple_4xx_status_codes(responses, None, context)
        second = no_multiple_4xx_status_codes(responses, None, context)

        assert first == second

    def test_result_path_is_a_copy(self, context: FunctionContext) -> None:
        """Test that the reported path does not alias the context path."""
        results = no_multiple_4xx_status_codes({"400": {}, "404": {}}, None, context)
        results[0]["path"].append("extra")

        assert context.path == RESPONSES_PATH


class TestNoMultiple5xxStatusCodes:
    """Tests for the 5xx counter."""

    def test_single_5xx_passes(self, context: FunctionContext) -> None:
        """Test that one 5xx code is allowed."""
        assert no_multiple_5xx_status_codes({"500": {}, "404": {}}, None, context) == []

    def test_multiple_5xx_fails(self, context: FunctionContext) -> None:
        """Test that two 5xx codes produce one result."""
        results = no_multiple_5xx_status_codes({"500": {}, "503": {}}, None, context)

        assert results == [{"message": MULTIPLE_5XX_MESSAGE, "path": RESPONSES_PATH}]

    def test_4xx_codes_are_ignored(self, context: FunctionContext) -> None:
        """Test that client error codes do not count as 5xx."""
        assert no_multiple_5xx_status_codes({"400": {}, "404": {}}, None, context) == []


class TestStatusCodeRules:
    """Tests for the status code rules running through the engine."""

    def test_rule_reports_each_operation(self, engine: RulesEngine) -> None:
        """Test that every offending responses object is reported once."""
        document = {
            "paths": {
                "/a": {"get": {"responses": {"400": {}, "404": {}}}},
                "/b": {"get": {"responses": {"400": {}}}},
                "/c": {"post": {"responses": {"409": {}, "422": {}}}},
            }
        }

        results = engine.results_for(document, "errors-processing-errors-no-multiple-4xx-codes")

        assert [result.path for result in results] == [
            ["paths", "/a", "get", "responses"],
            ["paths", "/c", "post", "responses"],
        ]
        assert results[0].message == (
            "paths./a.get.responses - Responses should not contain multiple 4XX status codes"
        )

    def test_5xx_rule(self, engine: RulesEngine) -> None:
        """Test the 5xx rule against a document with two server errors."""
        document = {"paths": {"/a": {"get": {"responses": {"500": {}, "502": {}}}}}}

        results = engine.results_for(document, "errors-processing-errors-no-multiple-5xx-codes")

        assert len(results) == 1
        assert results[0].path == ["paths", "/a", "get", "responses"]
