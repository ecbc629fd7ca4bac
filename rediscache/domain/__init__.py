"""Domain layer: exceptions.

No dependencies on infrastructure. Used by the cache and its collaborators.
"""

from rediscache.domain.exceptions import (
    CacheException,
    DecodeException,
    EncodeException,
    InvalidSchemaException,
    InvalidTtlException,
    SchemaViolationException,
    StoreException,
)

__all__ = [
    "CacheException",
    "DecodeException",
    "EncodeException",
    "InvalidSchemaException",
    "InvalidTtlException",
    "SchemaViolationException",
    "StoreException",
]
