"""Protocols the cache depends on: the key-value store and the value codec.

redis.asyncio.Redis satisfies KeyValueStoreProtocol; tests pass in-memory
stores implementing the same methods.
"""

from collections.abc import AsyncIterator
from typing import Any, Protocol


class KeyValueStoreProtocol(Protocol):
    """Subset of the redis.asyncio.Redis API used by RedisCache."""

    async def get(self, name: str) -> str | None:
        """Return the stored text or None if the key is missing."""
        ...

    async def set(
        self,
        name: str,
        value: str,
        ex: int | None = None,
        px: int | None = None,
    ) -> Any:
        """Upsert value with expiry (ex seconds or px milliseconds)."""
        ...

    async def exists(self, *names: str) -> int:
        """Return how many of names exist."""
        ...

    async def delete(self, *names: str) -> int:
        """Remove names; return how many were removed."""
        ...

    def scan_iter(
        self, match: str | None = None, count: int | None = None
    ) -> AsyncIterator[str]:
        """Iterate keys matching pattern with a cursor, count keys per batch."""
        ...

    async def keys(self, pattern: str = "*") -> list[str]:
        """Return every key matching pattern in one round trip."""
        ...

    async def aclose(self) -> None:
        """Release the connection pool."""
        ...


class CodecProtocol(Protocol):
    """Converts cache values to store text and back."""

    def encode(self, value: Any) -> str:
        ...

    def decode(self, data: str) -> Any:
        ...
