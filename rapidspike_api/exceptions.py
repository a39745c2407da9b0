"""
Custom exceptions for the RapidSpike API client.
"""


class RapidSpikeError(Exception):
    """Base exception for RapidSpike API client errors."""
    pass


class ConfigurationError(RapidSpikeError):
    """Raised when client or key configuration is invalid."""
    pass


class InvalidMethodError(RapidSpikeError):
    """Raised when a request is dispatched with an unsupported HTTP verb."""
    pass


class TransportError(RapidSpikeError):
    """Raised when the HTTP request itself fails."""
    pass


class HTTPStatusError(TransportError):
    """Raised when the API answers with an error status code."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(RapidSpikeError):
    """Raised when a response body is not valid JSON."""
    pass
