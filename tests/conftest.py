"""Pytest fixtures for jsonapi-lint tests."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable

import pytest

from jsonapi_lint.document import load_document
from jsonapi_lint.rules.engine import RulesEngine
from jsonapi_lint.rulesets import bundle

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project directory without configuration."""
    project = temp_dir / "project"
    project.mkdir()
    return project


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the test documents."""
    return FIXTURES_DIR


@pytest.fixture
def valid_document() -> dict[str, Any]:
    """A JSON:API compliant OpenAPI document, loaded fresh for every test."""
    return load_document(FIXTURES_DIR / "valid_api_document.yaml")


@pytest.fixture
def engine() -> RulesEngine:
    """Engine over every bundled rule with all rules disabled."""
    rules_engine = RulesEngine(bundle())
    rules_engine.disable_all()
    return rules_engine


@pytest.fixture
def make_document() -> Callable[..., dict[str, Any]]:
    """Factory building a minimal OpenAPI document around the given paths."""

    def _make(paths: dict[str, Any], schemas: dict[str, Any] | None = None) -> dict[str, Any]:
        document: dict[str, Any] = {
            "openapi": "3.0.3",
            "info": {"title": "Test", "version": "1.0.0"},
            "paths": copy.deepcopy(paths),
        }
        if schemas is not None:
            document["components"] = {"schemas": copy.deepcopy(schemas)}
        return document

    return _make
