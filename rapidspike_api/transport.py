"""
HTTP transport for the RapidSpike API client, built on a requests session.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from .exceptions import TransportError, HTTPStatusError

logger = logging.getLogger(__name__)


class RequestsTransport:
    """
    Performs single HTTP calls through a shared ``requests.Session``.

    No retries are attempted; every failure surfaces as a ``TransportError``.
    """

    def __init__(self, user_agent: Optional[str] = None):
        self.session = requests.Session()
        if user_agent:
            self.session.headers['User-Agent'] = user_agent

    def perform(self, method: str, url: str, headers: Dict[str, str],
                query: Dict[str, Any], body: Optional[bytes],
                timeout: float) -> Tuple[int, str]:
        """
        Make one HTTP request.

        Args:
            method: HTTP verb
            url: Absolute request URL
            headers: Request headers
            query: Query string parameters
            body: Encoded request body, or None
            timeout: Connect/read timeout in seconds

        Returns:
            Tuple of (status code, response text)

        Raises:
            TransportError: If the request fails
            HTTPStatusError: If the API answers with a 4xx/5xx status
        """
        kwargs = {
            'headers': headers,
            'params': query,
            'timeout': timeout,
        }
        if body:
            kwargs['data'] = body

        try:
            response = self.session.request(method.upper(), url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", method.upper(), url, response.status_code)

        if response.status_code >= 400:
            raise HTTPStatusError(
                f"HTTP {response.status_code} returned for {method.upper()} {url}",
                response.status_code,
                response.text
            )

        return response.status_code, response.text

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()
