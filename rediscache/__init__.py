"""rediscache: typed, namespaced, schema-validated cache over Redis.

Public API re-exported from the infrastructure and domain layers.
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
from rediscache.infrastructure.cache import RedisCache, RedisCacheOptions

__all__ = [
    "CacheException",
    "DecodeException",
    "EncodeException",
    "InvalidSchemaException",
    "InvalidTtlException",
    "RedisCache",
    "RedisCacheOptions",
    "SchemaViolationException",
    "StoreException",
]
