"""JSON codec for cached values."""

from __future__ import annotations

import json
from typing import Any

from rediscache.domain.exceptions import DecodeException, EncodeException


class JsonCodec:
    """Encodes values as compact JSON text (UTF-8 safe, NaN rejected)."""

    def encode(self, value: Any) -> str:
        """Serialize value for the store.

        Raises:
            EncodeException: If value is not JSON-serializable.
        """
        try:
            return json.dumps(value, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise EncodeException(str(e)) from e

    def decode(self, data: str) -> Any:
        """Deserialize stored text.

        Raises:
            DecodeException: If data is not valid JSON.
        """
        try:
            return json.loads(data)
        except (TypeError, ValueError) as e:
            raise DecodeException(str(e)) from e
