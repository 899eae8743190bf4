#!/usr/bin/env python3
"""
Basic usage examples for the Warranted Python client library.

This script demonstrates how to verify a Warranted webhook signature and,
when credentials are available, how to call the Warranted API.

Run with:
    WARRANTED_ACCOUNT_ID=... WARRANTED_AUTH_TOKEN=... python example_usage.py
"""

import json
import logging
import os
import sys

import requests

from warranted import (
    WarrantedClient,
    WarrantedClientError,
    HEADER_WARRANTED_SIGNATURE,
    create_hmac
)


def webhook_example(client):
    """Verify a webhook the way a request handler would."""
    print("1. Verifying a webhook signature...")

    url = "https://example.com/webhooks/warranted"
    body = json.dumps({"id": "decision-123", "status": "complete"})

    # Warranted computes this and sends it in the X-Warranted-Signature header
    headers = {HEADER_WARRANTED_SIGNATURE: create_hmac(url, body, client.auth_token)}

    is_valid = client.validate_request(headers[HEADER_WARRANTED_SIGNATURE], url, body)
    print(f"   Genuine webhook: {'✓ Valid' if is_valid else '✗ Invalid'}")

    is_valid = client.validate_request(headers[HEADER_WARRANTED_SIGNATURE], url, body + " ")
    print(f"   Tampered webhook: {'✓ Valid' if is_valid else '✗ Invalid'}")
    print()


def api_example(client):
    """Call the API with the configured account."""
    print("2. Fetching account details...")
    me = client.me.get()
    print(f"   {json.dumps(me, indent=2)}")
    print()

    print("3. Listing law enforcement requests...")
    requests_page = client.law_enforcement_requests.get({"startAt": 0, "limit": 5})
    print(f"   Received {len(requests_page)} request(s)")
    print()

    print("4. Fetching the schema...")
    schema = client.schema.get()
    print(f"   Schema keys: {sorted(schema) if isinstance(schema, dict) else schema}")
    print()


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)

    account_id = os.environ.get("WARRANTED_ACCOUNT_ID", "demo-account")
    auth_token = os.environ.get("WARRANTED_AUTH_TOKEN", "demo-auth-token")
    host = os.environ.get("WARRANTED_HOST")

    print("=== Warranted Python Client Usage Examples ===\n")

    config = {"host": host} if host else {}
    with WarrantedClient(account_id, auth_token, **config) as client:
        print(f"   Client created for: {client.host}")
        print(f"   Account id: {account_id}\n")

        webhook_example(client)

        if "WARRANTED_AUTH_TOKEN" not in os.environ:
            print("Set WARRANTED_ACCOUNT_ID and WARRANTED_AUTH_TOKEN to call the API.")
            return 0

        try:
            api_example(client)
        except (WarrantedClientError, requests.RequestException) as e:
            print(f"   ✗ Request failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
