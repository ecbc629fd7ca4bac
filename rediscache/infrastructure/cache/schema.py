"""Compiled JSON Schema validator for cached values.

The schema is checked and compiled once, when the cache is built; every
read reuses the same validator instance.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

import jsonschema
from jsonschema.exceptions import SchemaError

from rediscache.domain.exceptions import InvalidSchemaException, SchemaViolationException


class SchemaValidator:
    """Validates decoded values against one JSON Schema."""

    def __init__(self, schema: Mapping[str, Any]) -> None:
        """Compile schema with the validator class its $schema selects.

        Args:
            schema: JSON Schema describing the cached entry type.

        Raises:
            InvalidSchemaException: If schema is not a mapping or is not a valid schema.
        """
        if not isinstance(schema, Mapping):
            raise InvalidSchemaException(
                f"schema must be a mapping, got {type(schema).__name__}"
            )
        schema = copy.deepcopy(schema)
        try:
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
        except SchemaError as e:
            raise InvalidSchemaException(e.message) from e
        self.schema = schema
        self._validator = validator_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)

    def is_valid(self, value: Any) -> bool:
        return self._validator.is_valid(value)

    def errors(self, value: Any) -> list[str]:
        """Validation messages for value, ordered by location in the instance."""
        found = sorted(self._validator.iter_errors(value), key=lambda e: [str(p) for p in e.path])
        return [
            f"{'/'.join(str(p) for p in e.path)}: {e.message}" if e.path else e.message
            for e in found
        ]

    def validate(self, value: Any, key: str | None = None) -> None:
        """Raise SchemaViolationException if value does not match the schema.

        Args:
            value: Decoded value.
            key: Physical key the value was read from (for the error details).
        """
        if self._validator.is_valid(value):
            return
        raise SchemaViolationException(key, self.errors(value))
