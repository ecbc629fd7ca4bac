"""Key namespace: maps logical ids to physical store keys and back.

Keys are built by plain concatenation (prefix + id). Ids are neither escaped
nor checked for delimiters, so a caller must choose prefixes that do not
overlap: with prefixes "user:" and "user:admin:" the first namespace also
matches the second one's keys.
"""

import re

from rediscache.core.constants import MATCH_ALL

# Redis glob metacharacters (SCAN MATCH / KEYS)
_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(text: str) -> str:
    """Backslash-escape Redis glob metacharacters so text matches literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", text)


class KeyNamespace:
    """Fixed-prefix namespace for one cache instance."""

    def __init__(self, prefix: str) -> None:
        """Initialize with the namespace prefix.

        Args:
            prefix: Non-empty string prepended to every id.

        Raises:
            ValueError: If prefix is empty or not a string.
        """
        if not isinstance(prefix, str) or not prefix:
            raise ValueError(f"Cache prefix must be a non-empty string, got: {prefix!r}")
        self._prefix = prefix
        self._pattern = escape_glob(prefix) + MATCH_ALL

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def pattern(self) -> str:
        """Store match pattern covering every key in the namespace.

        The prefix is escaped; the stored keys themselves are not.
        """
        return self._pattern

    def key(self, id: str) -> str:
        """Physical store key for a logical id."""
        return self._prefix + id

    def strip(self, key: str) -> str:
        """Logical id for a physical key returned by a namespace scan."""
        return key[len(self._prefix):]
