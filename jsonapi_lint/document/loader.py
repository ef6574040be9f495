"""Loading OpenAPI documents from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class DocumentLoadError(ValueError):
    """The document could not be read or parsed."""


def _normalize_keys(value: Any) -> Any:
    """Convert mapping keys to strings.

    YAML turns unquoted status codes such as ``404:`` into integers, while
    JSON and the rule selectors always see them as strings.
    """
    if isinstance(value, dict):
        return {str(key): _normalize_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize_keys(item) for item in value]
    return value


def parse_document(content: str, suffix: str = ".yaml") -> Any:
    """Parse document text.

    Args:
        content: Raw document text.
        suffix: File suffix deciding the format; ".json" is parsed as JSON,
            anything else as YAML.

    Returns:
        The parsed document with string mapping keys.

    Raises:
        DocumentLoadError: If the text is not valid JSON or YAML.
    """
    try:
        if suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Could not parse document: {e}") from e

    return _normalize_keys(data)


def load_document(path: Path | str) -> Any:
    """Load a document from disk.

    Args:
        path: Path to a .yaml, .yml or .json file.

    Returns:
        The parsed document.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Could not read {path}: {e}") from e

    logger.debug("Loaded %d characters from %s", len(content), path)
    return parse_document(content, path.suffix)
