"""Pytest configuration and fixtures for rediscache.

InMemoryStore implements the store methods RedisCache calls, with Redis
glob matching (redis_glob_match), so unit tests run without a Redis server.
"""

import re
from collections.abc import AsyncIterator
from typing import Any

import pytest

from rediscache.infrastructure.cache.redis_cache import RedisCache, RedisCacheOptions

USER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer"},
    },
    "required": ["name", "age"],
}


def redis_glob_match(pattern: str, key: str) -> bool:
    """Match key against a Redis glob: * ? [set] [^set] [a-z] and backslash escapes."""
    out: list[str] = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "\\" and i + 1 < len(pattern):
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if c == "*":
            out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            j = i + 1
            negate = j < len(pattern) and pattern[j] == "^"
            if negate:
                j += 1
            members: list[str] = []
            while j < len(pattern) and pattern[j] != "]":
                if pattern[j] == "\\" and j + 1 < len(pattern):
                    j += 1
                    members.append(re.escape(pattern[j]))
                elif pattern[j] == "-" and members and j + 1 < len(pattern) and pattern[j + 1] != "]":
                    members.append("-")
                else:
                    members.append(re.escape(pattern[j]))
                j += 1
            out.append("[" + ("^" if negate else "") + "".join(members) + "]")
            i = j
        else:
            out.append(re.escape(c))
        i += 1
    return re.fullmatch("".join(out), key, re.DOTALL) is not None


class InMemoryStore:
    """Dict-backed stand-in for redis.asyncio.Redis (decode_responses=True)."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.expiry: dict[str, dict[str, int | None]] = {}
        self.scan_calls: list[tuple[str | None, int | None]] = []
        self.closed = False

    async def get(self, name: str) -> str | None:
        return self.data.get(name)

    async def set(
        self, name: str, value: str, ex: int | None = None, px: int | None = None
    ) -> bool:
        self.data[name] = value
        self.expiry[name] = {"ex": ex, "px": px}
        return True

    async def exists(self, *names: str) -> int:
        return sum(1 for n in names if n in self.data)

    async def delete(self, *names: str) -> int:
        removed = [n for n in names if n in self.data]
        for n in removed:
            del self.data[n]
            self.expiry.pop(n, None)
        return len(removed)

    async def scan_iter(
        self, match: str | None = None, count: int | None = None
    ) -> AsyncIterator[str]:
        self.scan_calls.append((match, count))
        for key in list(self.data):
            if match is None or redis_glob_match(match, key):
                yield key

    async def keys(self, pattern: str = "*") -> list[str]:
        return [k for k in self.data if redis_glob_match(pattern, k)]

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory store shared by caches in one test."""
    return InMemoryStore()


@pytest.fixture
def user_options() -> RedisCacheOptions:
    """Options for the user cache: prefix 'user:', ttl 60, name/age schema."""
    return RedisCacheOptions(prefix="user:", ttl=60, schema=USER_SCHEMA, scan_count=10)


@pytest.fixture
def cache(store: InMemoryStore, user_options: RedisCacheOptions) -> RedisCache[dict[str, Any]]:
    """User cache over the in-memory store."""
    return RedisCache(user_options, client=store)
