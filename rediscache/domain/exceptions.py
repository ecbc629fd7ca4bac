"""Domain exceptions for the rediscache library.

Every failure a cache operation can surface is one of these. Construction
errors (InvalidTtlException, InvalidSchemaException) are fatal: fix the
configuration and build a new cache. Absence of an entry is never an
exception; get() returns None for that.
"""

from typing import Any

from rediscache.core.constants import (
    ERROR_DECODE_FAILURE,
    ERROR_ENCODE_FAILURE,
    ERROR_INVALID_SCHEMA,
    ERROR_SCHEMA_CHECK,
    ERROR_STORE,
    ERROR_UNEXPECTED_TTL,
)


class CacheException(Exception):
    """Base exception for all rediscache errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, validation errors).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class InvalidTtlException(CacheException):
    """Raised at construction when ttl is not a positive number."""

    def __init__(self, ttl: Any) -> None:
        """Initialize with the rejected ttl.

        Args:
            ttl: The ttl value passed in the cache options.
        """
        super().__init__(
            f"TTL must be a positive number, got: {ttl!r}",
            ERROR_UNEXPECTED_TTL,
            {"ttl": ttl},
        )


class InvalidSchemaException(CacheException):
    """Raised at construction when the schema cannot be compiled."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Invalid cache schema: {reason}",
            ERROR_INVALID_SCHEMA,
            {"reason": reason},
        )


class StoreException(CacheException):
    """Raised when communication with the backing store fails.

    The original error is chained as __cause__.
    """

    def __init__(self, operation: str, key: str | None = None) -> None:
        """Initialize with the failed store operation.

        Args:
            operation: Store command that failed (e.g. 'get', 'scan').
            key: Physical key or pattern involved, if any.
        """
        details: dict[str, Any] = {"operation": operation}
        if key is not None:
            details["key"] = key
        super().__init__(
            f"Store {operation} failed" + (f" for {key!r}" if key is not None else ""),
            ERROR_STORE,
            details,
        )


class EncodeException(CacheException):
    """Raised when a value cannot be serialized for the store."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Could not encode value: {reason}",
            ERROR_ENCODE_FAILURE,
            {"reason": reason},
        )


class DecodeException(CacheException):
    """Raised when stored text cannot be deserialized."""

    def __init__(self, reason: str, key: str | None = None) -> None:
        """Initialize with the decode error and optional key.

        Args:
            reason: Description of the decode failure.
            key: Physical key whose payload was malformed.
        """
        details: dict[str, Any] = {"reason": reason}
        if key is not None:
            details["key"] = key
        super().__init__(
            f"Could not decode stored value: {reason}",
            ERROR_DECODE_FAILURE,
            details,
        )


class SchemaViolationException(CacheException):
    """Raised when a decoded value does not match the cache schema."""

    def __init__(self, key: str | None, validation_errors: list[str]) -> None:
        """Initialize with key and validation errors.

        Args:
            key: Physical key whose value failed validation.
            validation_errors: Messages produced by the schema validator.
        """
        super().__init__(
            "Schema check failed" + (f" for {key!r}" if key is not None else ""),
            ERROR_SCHEMA_CHECK,
            {"key": key, "errors": validation_errors},
        )
