"""
Warranted API client.

This module provides the authenticated HTTP client for the Warranted API
and verification of the HMAC signatures Warranted attaches to webhooks.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

import requests
from requests.auth import HTTPBasicAuth

from .constants import DEFAULT_CONFIG
from .crypto import create_hmac, time_safe_compare
from .exceptions import ConfigurationError
from .resources import Decisions, LawEnforcementRequests, Me, Schema

logger = logging.getLogger(__name__)


class WarrantedClient:
    """
    Client for the Warranted API.

    Requests are authenticated with HTTP basic auth using the account id
    and auth token. The auth token is also the key of the HMAC signatures
    on inbound webhooks, checked with :meth:`validate_request`.

    Resources are exposed as attributes::

        client.decisions.get("decision-123")
        client.law_enforcement_requests.get({"limit": 10})
        client.me.get()
        client.schema.get()
    """

    def __init__(self, account_id: str, auth_token: str, **config):
        """
        Initialize Warranted client.

        Args:
            account_id: The account id
            auth_token: The primary auth token
            **config: Configuration options (host, headers, timeout)
        """
        self.account_id = account_id
        self.auth_token = auth_token

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.host = self.config['host'].rstrip('/')
        self.headers = dict(self.config['headers'])

        # Create HTTP session
        self.session = requests.Session()
        self.session.auth = HTTPBasicAuth(self.account_id, self.auth_token)

        self.decisions = Decisions(self)
        self.law_enforcement_requests = LawEnforcementRequests(self)
        self.me = Me(self)
        self.schema = Schema(self)

    def _validate_config(self):
        """Validate client credentials and configuration."""
        if not self.account_id:
            raise ConfigurationError("No accountId provided")

        if not self.auth_token:
            raise ConfigurationError("No authToken provided")

        self._check_host(self.config['host'])

        if not isinstance(self.config['headers'], Mapping):
            raise ConfigurationError("headers must be a mapping")

        timeout = self.config['timeout']
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ConfigurationError("timeout must be a number")
            if timeout <= 0:
                raise ConfigurationError("timeout must be positive")

    @staticmethod
    def _check_host(host):
        if not isinstance(host, str):
            raise ConfigurationError("host must be a string")
        if not host:
            raise ConfigurationError("host cannot be empty")

    def set_host(self, host: str):
        """Point the client at a different Warranted host."""
        self._check_host(host)
        self.host = host.rstrip('/')

    def set_headers(self, headers: Dict[str, str]):
        """Replace the extra headers sent with every request."""
        if not isinstance(headers, Mapping):
            raise ConfigurationError("headers must be a mapping")
        self.headers = dict(headers)

    def validate_request(self, signature: Optional[str], url: str,
                         body: Union[str, bytes]) -> bool:
        """
        Validate the signature of a webhook request.

        Args:
            signature: Value of the X-Warranted-Signature header
            url: The full URL that received the request
            body: The raw request body

        Returns:
            True if the signature matches
        """
        expected = create_hmac(url, body, self.auth_token)
        valid = time_safe_compare(signature, expected)
        if not valid:
            logger.debug("Rejected webhook signature for %s", url)
        return valid

    def _build_headers(self, json_body: bool) -> Dict[str, str]:
        headers = {}
        if json_body:
            headers['Content-Type'] = 'application/json'
        # Caller headers take precedence
        headers.update(self.headers)
        return headers

    def request(self, method: str, path: str, params=None, json_data=None,
                files=None) -> Any:
        """
        Make an authenticated request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: API path (relative to host)
            params: Query string parameters
            json_data: Object to send as a JSON body
            files: Multipart files, as accepted by requests

        Returns:
            Decoded response body, or None if the response is empty

        Raises:
            requests.RequestException: If the request fails or the server
                answers with an error status
        """
        url = self.host + path

        kwargs: Dict[str, Any] = {
            'headers': self._build_headers(json_data is not None),
            'timeout': self.config['timeout'],
        }
        if params:
            kwargs['params'] = params
        if json_data is not None:
            kwargs['data'] = json.dumps(dict(json_data), separators=(',', ':')).encode('utf-8')
        if files:
            kwargs['files'] = files

        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, **kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        response.raise_for_status()

        if not response.content:
            return None
        return response.json()

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
