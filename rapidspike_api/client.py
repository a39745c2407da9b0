"""
Fluent client for the RapidSpike REST API.

The client separates building the end-point and request data from the HTTP
logic: chained calls accumulate a path, query data, a JSON body and headers,
and ``dispatch()`` hands the assembled request to the transport.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .auth import KeyAuth
from .codec import JSONCodec
from .constants import (
    API_VERSION,
    BODY_METHODS,
    CONTENT_TYPE_JSON,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    USER_AGENT,
    VALID_METHODS
)
from .exceptions import ConfigurationError, InvalidMethodError
from .transport import RequestsTransport

logger = logging.getLogger(__name__)


def standardise_path(path: Any) -> str:
    """Lower-case a path segment, strip leading slashes and add one trailing slash."""
    return str(path).lower().lstrip('/') + '/'


class Client:
    """
    Client for making signed requests to the RapidSpike API.

    Any public name other than the fluent methods becomes a path segment, so
    end-points are built by chaining::

        client.websites(5).properties().dispatch('get')
        # GET https://api.rapidspike.com/v1/websites/5/properties/

    The reserved names are ``set_key_auth``, ``set_raw``, ``add_header``,
    ``add_query_data``, ``add_json_body``, ``call_path``, ``segment``,
    ``dispatch`` and ``via``; use ``segment()`` to add one of those to a
    path. Use the client as a context manager to close its HTTP session.

    Path, query data and JSON body are request-scoped and cleared after every
    dispatch, successful or not. Headers and key authentication persist.

    A client is not thread-safe: one instance serves one in-flight request.
    Use a separate instance per thread.
    """

    def __init__(self, public_key: Optional[str] = None,
                 private_key: Optional[str] = None,
                 url: str = DEFAULT_BASE_URL,
                 transport=None, codec=None, **config):
        """
        Initialize the client.

        Args:
            public_key: API public key
            private_key: API private key
            url: Base URL of the API, without the version segment
            transport: HTTP transport (defaults to a requests session)
            codec: JSON codec for bodies and responses
            **config: Configuration options (timeout, raw)
        """
        self._key_auth = None
        if public_key and private_key:
            self._key_auth = KeyAuth(public_key, private_key)
        elif public_key or private_key:
            # Only one half of the key pair: requests go out unsigned
            logger.debug("Incomplete key pair supplied, client is unauthenticated")

        self._url = f"{url.rstrip('/')}/{API_VERSION}/"

        # Merge default config with user overrides
        self._config = {**DEFAULT_CONFIG, **config}
        self._validate_config()
        self._config['raw'] = bool(self._config['raw'])

        self._transport = transport if transport is not None else RequestsTransport(USER_AGENT)
        self._codec = codec if codec is not None else JSONCodec()

        self._headers: Dict[str, str] = {}
        self._path = ''
        self._query_data: Dict[str, Any] = {}
        self._json_body: Dict[str, Any] = {}

    def _validate_config(self):
        """Validate client configuration."""
        unknown = set(self._config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

        timeout = self._config['timeout']
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError("timeout must be a positive number")

    def set_key_auth(self, key_auth: Optional[KeyAuth]) -> 'Client':
        """Replace the key pair used to sign requests; None disables signing."""
        self._key_auth = key_auth
        return self

    def set_raw(self, raw: bool = True) -> 'Client':
        """Return response bodies as text instead of decoded JSON."""
        self._config['raw'] = bool(raw)
        return self

    def add_header(self, key: str, value: str) -> 'Client':
        """
        Set a header sent with every subsequent request.

        Args:
            key: Header name, e.g. 'Accept'
            value: Header value
        """
        self._headers[key] = value
        return self

    def add_query_data(self, query_data: Mapping[str, Any]) -> 'Client':
        """Merge items into the query data; later values win."""
        self._query_data.update(query_data)
        return self

    def add_json_body(self, json_body: Mapping[str, Any]) -> 'Client':
        """Merge items into the JSON body; later values win."""
        self._json_body.update(json_body)
        return self

    def call_path(self, path: str) -> 'Client':
        """
        Set the whole end-point path, discarding any chained segments.

        Args:
            path: End-point path, e.g. 'websites/5/properties'
        """
        self._path = standardise_path(path)
        return self

    def segment(self, name: Any, *args: Any) -> 'Client':
        """
        Append a path segment, followed by each argument as its own segment.

        ``client.segment('websites', 5)`` adds ``websites/5/`` to the path.
        """
        self._path += standardise_path(name)
        for value in args:
            self._path += standardise_path(value)
        return self

    def __getattr__(self, name: str) -> Callable[..., 'Client']:
        # Only reached for names the class doesn't define; state lives in
        # underscore attributes so every public name is free to chain
        if name.startswith('_'):
            raise AttributeError(name)

        def chain(*args: Any) -> 'Client':
            return self.segment(name, *args)

        return chain

    def dispatch(self, method: str) -> Any:
        """
        Make the request built so far.

        Args:
            method: HTTP verb, one of get, post, put or delete

        Returns:
            Decoded JSON (object, list or string), the raw body text in raw
            mode, or None if the response body was empty

        Raises:
            InvalidMethodError: If the verb is not supported
            TransportError: If the HTTP request fails
            DecodeError: If the response body is not valid JSON
        """
        try:
            _method = method.lower()
            if _method not in VALID_METHODS:
                raise InvalidMethodError(f"Invalid HTTP method '{_method}' specified.")

            headers = dict(self._headers)
            body = None
            if self._json_body and _method in BODY_METHODS:
                body = self._codec.encode(self._json_body)
                if not any(key.lower() == 'content-type' for key in headers):
                    headers['Content-Type'] = CONTENT_TYPE_JSON

            # Sign last so the timestamp is as close as possible to the request
            if self._key_auth is not None:
                self.add_query_data(self._key_auth.get_signature())

            url = self._url + self._path
            logger.debug("Dispatching %s %s", _method.upper(), url)

            _, text = self._transport.perform(
                _method, url, headers, dict(self._query_data), body, self._config['timeout']
            )

            if self._config['raw']:
                return text
            if not text or not text.strip():
                return None
            return self._codec.decode(text)
        finally:
            # Reset so the client can be reused for the next request
            self._reset_request()

    via = dispatch

    def _reset_request(self):
        """Clear call path, query and JSON data."""
        self._path = ''
        self._query_data = {}
        self._json_body = {}

    def _close(self):
        """Close the underlying transport."""
        close = getattr(self._transport, 'close', None)
        if close is not None:
            close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self._close()
