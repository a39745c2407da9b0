"""
JSON encoding and decoding of request and response bodies.
"""

import json
from typing import Any, Mapping, Union

from .exceptions import DecodeError


class JSONCodec:
    """Compact JSON codec used for request bodies and API responses."""

    def encode(self, data: Mapping[str, Any]) -> bytes:
        return json.dumps(data, separators=(',', ':')).encode('utf-8')

    def decode(self, body: Union[str, bytes]) -> Any:
        """
        Decode a response body.

        Raises:
            DecodeError: If the body is not valid JSON
        """
        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in response body: {e}") from e
