"""
RapidSpike API Client

A small fluent client that builds end-point paths through method chaining
and signs every request with the account's public/private key pair.

Example usage:
    from rapidspike_api import Client

    client = Client("public-key", "private-key")
    websites = client.websites().dispatch("get")
    properties = client.websites(5).properties().dispatch("get")
"""

from .client import Client
from .auth import KeyAuth
from .codec import JSONCodec
from .transport import RequestsTransport
from .exceptions import (
    RapidSpikeError,
    ConfigurationError,
    InvalidMethodError,
    TransportError,
    HTTPStatusError,
    DecodeError
)
from .constants import (
    VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    VALID_METHODS
)

__version__ = VERSION
__author__ = "RapidSpike"
__all__ = [
    "Client",
    "KeyAuth",
    "JSONCodec",
    "RequestsTransport",
    "RapidSpikeError",
    "ConfigurationError",
    "InvalidMethodError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "VALID_METHODS"
]
