"""
Constants for the RapidSpike API client.
"""

VERSION = "1.1.0"
USER_AGENT = f"rapidspike-api-python/{VERSION}"

# Production endpoint; the version segment is appended by the client
DEFAULT_BASE_URL = "https://api.rapidspike.com"
API_VERSION = "v1"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 10,  # HTTP timeout in seconds
    'raw': False,   # return response bodies as text instead of decoding JSON
}

VALID_METHODS = frozenset(['get', 'post', 'put', 'delete'])
BODY_METHODS = frozenset(['post', 'put', 'delete'])

# Query parameters carrying the key signature
QUERY_PUBLIC_KEY = "public_key"
QUERY_TIME = "time"
QUERY_SIGNATURE = "signature"

# Allowed clock drift when checking a signature timestamp locally
DEFAULT_TIME_TOLERANCE = 5 * 60  # 5 minutes in seconds

CONTENT_TYPE_JSON = "application/json"
