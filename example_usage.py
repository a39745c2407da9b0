#!/usr/bin/env python3
"""
Basic usage examples for the RapidSpike API client.

This script demonstrates building end-points through method chaining and
making signed requests against the RapidSpike API.

Set RAPIDSPIKE_PUBLIC_KEY and RAPIDSPIKE_PRIVATE_KEY before running.
"""

import os
import sys

from rapidspike_api import (
    Client,
    KeyAuth,
    RapidSpikeError,
    HTTPStatusError,
    DEFAULT_BASE_URL
)


def main():
    """Run basic usage examples."""

    public_key = os.environ.get("RAPIDSPIKE_PUBLIC_KEY", "")
    private_key = os.environ.get("RAPIDSPIKE_PRIVATE_KEY", "")

    print("=== RapidSpike API Client Usage Examples ===\n")

    print("1. Creating client...")
    client = Client(public_key, private_key)
    signed = bool(public_key and private_key)
    print(f"   Base URL: {DEFAULT_BASE_URL}/v1/")
    print(f"   Signed requests: {'yes' if signed else 'no'}\n")

    print("2. Generating a request signature...")
    key_auth = KeyAuth("example-public-key", "example-private-key")
    signature = key_auth.get_signature()
    print(f"   Public key: {signature['public_key']}")
    print(f"   Time: {signature['time']}")
    print(f"   Signature: {signature['signature']}")
    print(f"   Verification: {'✓ Valid' if key_auth.verify(signature['signature'], signature['time']) else '✗ Invalid'}\n")

    if not signed:
        print("Set RAPIDSPIKE_PUBLIC_KEY and RAPIDSPIKE_PRIVATE_KEY to make live requests.")
        return 0

    with client:
        try:
            print("3. Listing websites...")
            websites = client.websites().add_query_data({'page': 1}).dispatch("get")
            print(f"   ✓ Response: {websites}\n")

            print("4. Chained path with an argument...")
            website_id = os.environ.get("RAPIDSPIKE_WEBSITE_ID", "1")
            properties = client.websites(website_id).properties().via("get")
            print(f"   ✓ Response: {properties}\n")

            print("5. Full path, raw response...")
            text = client.set_raw().call_path("/server/properties").dispatch("get")
            client.set_raw(False)
            print(f"   ✓ Body: {text[:80]}\n")
        except HTTPStatusError as e:
            print(f"   ✗ API returned {e.status_code}: {e.body}")
            return 1
        except RapidSpikeError as e:
            print(f"   ✗ Request error: {e}")
            return 1

    print("=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
