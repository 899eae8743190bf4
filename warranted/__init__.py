"""
Warranted Client Library

A Python client for the Warranted API, with verification of the HMAC
signatures Warranted sends on webhooks.

Example usage:
    from warranted import WarrantedClient

    client = WarrantedClient("your-account-id", "your-auth-token")
    decision = client.decisions.get("decision-123")

    # In a webhook handler
    client.validate_request(
        request.headers["X-Warranted-Signature"], request.url, request.body
    )
"""

import logging

from .client import WarrantedClient
from .crypto import create_hmac, time_safe_compare
from .exceptions import (
    WarrantedClientError,
    ConfigurationError,
    ValidationError
)
from .constants import (
    HEADER_WARRANTED_SIGNATURE,
    DEFAULT_HOST,
    DEFAULT_ALGORITHM,
    DEFAULT_CONFIG
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "Warranted"
__all__ = [
    "WarrantedClient",
    "create_hmac",
    "time_safe_compare",
    "WarrantedClientError",
    "ConfigurationError",
    "ValidationError",
    "HEADER_WARRANTED_SIGNATURE",
    "DEFAULT_HOST",
    "DEFAULT_ALGORITHM",
    "DEFAULT_CONFIG"
]
