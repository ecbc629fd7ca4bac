"""Core constants: key pattern wildcard, defaults, and error codes.

Single source of truth for literal values shared by the cache, its
exceptions, and configuration.
"""

# Appended to a prefix to match every key in the namespace (Redis glob syntax)
MATCH_ALL = "*"

# SCAN COUNT hint when none is configured
DEFAULT_SCAN_COUNT = 100

# Error codes (CacheException.error_code)
ERROR_UNEXPECTED_TTL = "UNEXPECTED_TTL"
ERROR_INVALID_SCHEMA = "INVALID_SCHEMA"
ERROR_STORE = "STORE_ERROR"
ERROR_ENCODE_FAILURE = "ENCODE_FAILURE"
ERROR_DECODE_FAILURE = "DECODE_FAILURE"
ERROR_SCHEMA_CHECK = "SCHEMA_CHECK"

# Iteration skip notices
NOTICE_COULD_NOT_FIND = "COULD_NOT_FIND"
