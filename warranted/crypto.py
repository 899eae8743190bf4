"""
HMAC signing and timing-safe comparison for Warranted webhooks.

A webhook signature is the hex HMAC of the request URL immediately
followed by the raw request body, keyed with the account auth token.
"""

import hmac
import logging
from typing import Optional, Union

from .constants import DEFAULT_ALGORITHM

logger = logging.getLogger(__name__)

StrOrBytes = Union[str, bytes]


def _to_bytes(value: StrOrBytes) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    try:
        return value.encode('utf-8')
    except UnicodeEncodeError:
        # Lone surrogates become U+FFFD, valid surrogate pairs are joined
        return value.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'replace').encode('utf-8')


def create_hmac(url: StrOrBytes, body: StrOrBytes, secret_key: StrOrBytes,
                algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Generate the HMAC of a request.

    Args:
        url: URL the request was sent to
        body: Raw request body
        secret_key: HMAC secret key (the account auth token)
        algorithm: Hash name understood by hashlib, e.g. 'sha256' or 'sha512'

    Returns:
        Lowercase hex-encoded HMAC of ``url + body``

    Raises:
        ValueError: If the hash algorithm is not supported
    """
    if isinstance(url, str) and isinstance(body, str):
        message = _to_bytes(url + body)
    else:
        message = _to_bytes(url) + _to_bytes(body)
    mac = hmac.new(_to_bytes(secret_key), message, algorithm)
    return mac.hexdigest()


def time_safe_compare(a: Optional[StrOrBytes], b: Optional[StrOrBytes]) -> bool:
    """
    Compare two strings in constant time.

    Inputs of different length, or that are not strings at all, compare
    unequal instead of raising.
    """
    try:
        return hmac.compare_digest(_to_bytes(a), _to_bytes(b))
    except (AttributeError, TypeError):
        logger.debug("Comparison of non-string values rejected")
        return False
