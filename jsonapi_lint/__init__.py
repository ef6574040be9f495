"""JSON:API ruleset for linting OpenAPI documents."""

__version__ = "0.3.0"
