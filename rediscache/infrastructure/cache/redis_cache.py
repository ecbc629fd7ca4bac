"""Typed, namespaced Redis cache.

RedisCache[T] stores entries of one logical type under a key prefix, with a
fixed TTL, and validates every value it reads against a JSON Schema compiled
at construction. Store failures are raised as StoreException; a missing
entry is returned as None.
"""

from __future__ import annotations

import math
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

import redis.asyncio as redis

from rediscache.core.config import Settings, get_settings
from rediscache.core.constants import (
    DEFAULT_SCAN_COUNT,
    ERROR_DECODE_FAILURE,
    ERROR_SCHEMA_CHECK,
    NOTICE_COULD_NOT_FIND,
)
from rediscache.domain.exceptions import (
    DecodeException,
    InvalidTtlException,
    SchemaViolationException,
    StoreException,
)
from rediscache.infrastructure.cache.cache_protocol import CodecProtocol, KeyValueStoreProtocol
from rediscache.infrastructure.cache.codec import JsonCodec
from rediscache.infrastructure.cache.keys import KeyNamespace
from rediscache.infrastructure.cache.schema import SchemaValidator
from rediscache.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RedisCacheOptions:
    """Configuration for one cache instance.

    Attributes:
        prefix: Namespace prepended to every id.
        ttl: Entry expiry in seconds (positive; fractions are sent as milliseconds).
        schema: JSON Schema every read value must satisfy.
        scan_count: SCAN COUNT hint; None uses the configured default.
    """

    prefix: str
    ttl: int | float
    schema: Mapping[str, Any]
    scan_count: int | None = None


def _validate_ttl(ttl: Any) -> None:
    """Raise InvalidTtlException unless ttl is a finite number greater than zero."""
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise InvalidTtlException(ttl)
    if math.isnan(ttl) or math.isinf(ttl) or ttl <= 0:
        raise InvalidTtlException(ttl)


def _expiry_args(ttl: int | float) -> dict[str, int]:
    """SET expiry keyword for ttl: EX for whole seconds, PX otherwise."""
    if float(ttl).is_integer():
        return {"ex": int(ttl)}
    return {"px": max(1, round(ttl * 1000))}


class RedisCache(Generic[T]):
    """Async Redis cache for entries of type T.

    Every id is stored under options.prefix + id with options.ttl expiry.
    Use as an async context manager, or call close(), to release the
    connection pool.

    Example:
        async with RedisCache[dict](options, host="localhost") as cache:
            await cache.set("42", {"name": "Ana", "age": 30})
            user = await cache.get("42")
    """

    def __init__(
        self,
        options: RedisCacheOptions,
        client: KeyValueStoreProtocol | None = None,
        *,
        codec: CodecProtocol | None = None,
        **redis_options: Any,
    ) -> None:
        """Validate options, compile the schema, and open the store handle.

        The handle is created without connecting; the first command connects.

        Args:
            options: Cache configuration.
            client: Optional store client for testing or DI; otherwise a
                redis.asyncio.Redis is created from redis_options.
            codec: Value codec; defaults to JsonCodec.
            **redis_options: Passed to redis.asyncio.Redis when client is None.

        Raises:
            InvalidTtlException: If options.ttl is not a positive number.
            InvalidSchemaException: If options.schema is not a valid JSON Schema.
            ValueError: If prefix is empty or scan_count is not positive.
        """
        _validate_ttl(options.ttl)
        scan_count = DEFAULT_SCAN_COUNT if options.scan_count is None else options.scan_count
        if isinstance(scan_count, bool) or not isinstance(scan_count, int) or scan_count <= 0:
            raise ValueError(f"scan_count must be a positive integer, got: {scan_count!r}")
        self._options = options
        self._namespace = KeyNamespace(options.prefix)
        self._validator = SchemaValidator(options.schema)
        self._scan_count = scan_count
        self._expiry = _expiry_args(options.ttl)
        self._codec: CodecProtocol = codec or JsonCodec()
        if client is None:
            redis_options.setdefault("decode_responses", True)
            client = redis.Redis(**redis_options)
        self.client = client

    @classmethod
    def new(
        cls,
        options: RedisCacheOptions,
        redis_options: Mapping[str, Any] | None = None,
    ) -> RedisCache[T]:
        """Build a cache with its own Redis client.

        Args:
            options: Cache configuration.
            redis_options: Connection parameters for redis.asyncio.Redis.
        """
        return cls(options, **dict(redis_options or {}))

    @classmethod
    def from_settings(
        cls,
        options: RedisCacheOptions,
        settings: Settings | None = None,
    ) -> RedisCache[T]:
        """Build a cache whose connection and scan default come from Settings.

        Args:
            options: Cache configuration.
            settings: Settings to use; defaults to get_settings().
        """
        settings = settings or get_settings()
        if options.scan_count is None:
            options = replace(options, scan_count=settings.cache_default_scan_count)
        cache = cls(options, **settings.redis_options())
        logger.info(
            "Redis cache %r configured for %s:%s",
            options.prefix,
            settings.redis_host,
            settings.redis_port,
        )
        return cache

    @property
    def prefix(self) -> str:
        return self._namespace.prefix

    @property
    def ttl(self) -> int | float:
        return self._options.ttl

    @property
    def scan_count(self) -> int:
        return self._scan_count

    async def close(self) -> None:
        """Close the store connection."""
        await self.client.aclose()
        logger.info("Redis cache %r closed", self.prefix)

    async def __aenter__(self) -> RedisCache[T]:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _fetch(self, key: str) -> Any | None:
        """Read and decode the value at a physical key; None if absent.

        Raises:
            StoreException: On store communication failure.
            DecodeException: If the stored text is malformed.
        """
        try:
            data = await self.client.get(key)
        except redis.RedisError as e:
            raise StoreException("get", key) from e
        if not data:
            logger.debug("Cache MISS: %s", key)
            return None
        try:
            value = self._codec.decode(data)
        except DecodeException as e:
            raise DecodeException(e.details.get("reason", e.message), key) from e
        logger.debug("Cache HIT: %s", key)
        return value

    async def get(self, id: str) -> T | None:
        """Return the entry for id, or None if it does not exist.

        An empty payload or a stored JSON null is returned as None as well.

        Raises:
            StoreException: On store communication failure.
            DecodeException: If the stored text is malformed.
            SchemaViolationException: If the value does not match the schema.
        """
        key = self._namespace.key(id)
        value = await self._fetch(key)
        if value is None:
            return None
        self._validator.validate(value, key)
        return value

    async def set(self, id: str, value: T) -> None:
        """Store value under id, replacing any previous entry and resetting its TTL.

        Raises:
            EncodeException: If value cannot be serialized.
            StoreException: On store communication failure.
        """
        key = self._namespace.key(id)
        data = self._codec.encode(value)
        try:
            await self.client.set(key, data, **self._expiry)
        except redis.RedisError as e:
            raise StoreException("set", key) from e
        logger.debug("Cache SET: %s (TTL: %ss)", key, self.ttl)

    async def has(self, id: str) -> bool:
        """Return True if an entry exists for id (the value is not read)."""
        key = self._namespace.key(id)
        try:
            return await self.client.exists(key) == 1
        except redis.RedisError as e:
            raise StoreException("exists", key) from e

    async def delete(self, id: str) -> bool:
        """Remove the entry for id. Returns True whether or not it existed."""
        key = self._namespace.key(id)
        try:
            await self.client.delete(key)
        except redis.RedisError as e:
            raise StoreException("delete", key) from e
        logger.debug("Cache DELETE: %s", key)
        return True

    async def _scan(self) -> AsyncIterator[str]:
        """Physical keys in the namespace, fetched in SCAN batches of scan_count."""
        pattern = self._namespace.pattern
        try:
            async for key in self.client.scan_iter(match=pattern, count=self._scan_count):
                yield key.decode() if isinstance(key, bytes) else key
        except redis.RedisError as e:
            raise StoreException("scan", pattern) from e

    async def keys(self) -> AsyncIterator[str]:
        """Yield the id of every entry in the namespace.

        Each call starts a new SCAN cursor. Entries written or expiring
        during the scan may or may not be seen.
        """
        async for key in self._scan():
            yield self._namespace.strip(key)

    async def size(self) -> int:
        """Number of keys in the namespace, from a single KEYS request."""
        pattern = self._namespace.pattern
        try:
            found = await self.client.keys(pattern)
        except redis.RedisError as e:
            raise StoreException("keys", pattern) from e
        return len(found)

    async def __aiter__(self) -> AsyncIterator[tuple[str, T]]:
        """Yield (id, value) for every entry in the namespace.

        Entries that expired after the scan saw them, or whose payload fails
        to decode or validate, are logged and skipped. Store failures are
        raised.
        """
        async for key in self._scan():
            try:
                value = await self._fetch(key)
            except DecodeException as e:
                logger.warning('%s "%s": %s', ERROR_DECODE_FAILURE, key, e.details["reason"])
                continue
            if value is None:
                logger.warning('%s "%s"', NOTICE_COULD_NOT_FIND, key)
                continue
            try:
                self._validator.validate(value, key)
            except SchemaViolationException as e:
                logger.warning('%s "%s": %s', ERROR_SCHEMA_CHECK, key, "; ".join(e.details["errors"]))
                continue
            yield self._namespace.strip(key), value
