"""
Custom exceptions for the Warranted client library.

Transport and HTTP status errors are not wrapped: they surface as the
``requests`` exceptions raised by the underlying session.
"""


class WarrantedClientError(Exception):
    """Base exception for Warranted client errors."""
    pass


class ConfigurationError(WarrantedClientError):
    """Raised when client credentials or configuration are invalid."""
    pass


class ValidationError(WarrantedClientError):
    """Raised when an identifier or payload is rejected before sending."""
    pass
