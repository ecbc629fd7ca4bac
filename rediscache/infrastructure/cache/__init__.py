"""Cache: typed Redis cache, key namespace, codec, and schema validator.

RedisCache composes KeyNamespace (keys.py), JsonCodec (codec.py) and
SchemaValidator (schema.py) over a KeyValueStoreProtocol client.
"""

from rediscache.infrastructure.cache.cache_protocol import CodecProtocol, KeyValueStoreProtocol
from rediscache.infrastructure.cache.codec import JsonCodec
from rediscache.infrastructure.cache.keys import KeyNamespace
from rediscache.infrastructure.cache.redis_cache import RedisCache, RedisCacheOptions
from rediscache.infrastructure.cache.schema import SchemaValidator

__all__ = [
    "CodecProtocol",
    "JsonCodec",
    "KeyNamespace",
    "KeyValueStoreProtocol",
    "RedisCache",
    "RedisCacheOptions",
    "SchemaValidator",
]
