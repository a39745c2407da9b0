"""
Key pair request signing for the RapidSpike API.

Every authenticated request carries the caller's public key, the current
Unix time and an HMAC-SHA1 digest of both keyed with the private key. The
private key itself never leaves the client.
"""

import base64
import hashlib
import hmac
import time
from typing import Dict, Union

from .constants import (
    QUERY_PUBLIC_KEY,
    QUERY_TIME,
    QUERY_SIGNATURE,
    DEFAULT_TIME_TOLERANCE
)
from .exceptions import ConfigurationError


class KeyAuth:
    """
    Public/private key pair used to sign API requests.
    """

    def __init__(self, public_key: str, private_key: str):
        """
        Initialize the key pair.

        Args:
            public_key: API public key, sent with every request
            private_key: API private key, used only as the HMAC key

        Raises:
            ConfigurationError: If either key is empty
        """
        if not public_key:
            raise ConfigurationError("public_key cannot be empty")
        if not private_key:
            raise ConfigurationError("private_key cannot be empty")

        self._public_key = public_key
        self._private_key = private_key

    @property
    def public_key(self) -> str:
        return self._public_key

    @property
    def private_key(self) -> str:
        return self._private_key

    def _digest(self, timestamp: int) -> str:
        message = f"{self._public_key}\n{timestamp}"
        mac = hmac.new(
            self._private_key.encode('utf-8'),
            message.encode('utf-8'),
            hashlib.sha1
        )
        return base64.b64encode(mac.digest()).decode('ascii')

    def get_signature(self) -> Dict[str, Union[str, int]]:
        """
        Generate a signature bound to the current time.

        The timestamp is read on every call; the API rejects signatures
        outside its tolerance window, so call this immediately before the
        request goes out.

        Returns:
            Flat mapping of public key, timestamp and digest, ready to be
            merged into the query data
        """
        timestamp = int(time.time())

        return {
            QUERY_PUBLIC_KEY: self._public_key,
            QUERY_TIME: timestamp,
            QUERY_SIGNATURE: self._digest(timestamp),
        }

    def verify(self, signature: str, timestamp: int,
               tolerance: int = DEFAULT_TIME_TOLERANCE) -> bool:
        """
        Check a signature produced by this key pair.

        Args:
            signature: Base64 digest to check
            timestamp: Unix time the signature claims
            tolerance: Allowed drift from the local clock, in seconds

        Returns:
            True if the digest matches and the timestamp is within tolerance
        """
        try:
            timestamp = int(timestamp)
        except (TypeError, ValueError):
            return False

        if abs(time.time() - timestamp) > tolerance:
            return False

        # Use constant-time comparison to prevent timing attacks
        return hmac.compare_digest(self._digest(timestamp), str(signature))

    def __repr__(self) -> str:
        return f"KeyAuth(public_key={self._public_key!r})"
