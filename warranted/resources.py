"""
Resource accessors for the Warranted REST API.

Each accessor is bound to a :class:`~warranted.client.WarrantedClient`
and exposes the operations the API offers for that resource. Identifiers
and payloads are checked before anything is sent.
"""

import math
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union, BinaryIO

from .constants import (
    PATH_DECISION,
    PATH_LAW_ENFORCEMENT_REQUESTS,
    PATH_LAW_ENFORCEMENT_REQUEST,
    PATH_LAW_ENFORCEMENT_REQUEST_NEW,
    PATH_ME,
    PATH_SCHEMA,
    DECISION_ID_PREFIX,
    UPLOAD_FIELD_NAME,
    UPLOAD_CONTENT_TYPE,
    DEFAULT_UPLOAD_FILENAME
)
from .exceptions import ValidationError

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def parse_int(value) -> Optional[int]:
    """
    Parse the leading integer of a value, or return None.

    Mirrors how the API parses pagination values: ``"12abc"`` is 12,
    ``10.9`` is 10 and ``"abc"`` is not a number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


class Resource:
    """Base class for an API resource bound to a client."""

    def __init__(self, client):
        self._client = client


class Decisions(Resource):

    def get(self, decision_id: str) -> Any:
        """
        Get details about a decision.

        Args:
            decision_id: Decision id, starting with ``decision-``

        Raises:
            ValidationError: If the id is missing or malformed
        """
        if not decision_id or not str(decision_id).startswith(DECISION_ID_PREFIX):
            raise ValidationError(
                f"Invalid Decision Id. Must start with `{DECISION_ID_PREFIX}`"
            )
        return self._client.request('GET', PATH_DECISION.format(decision_id=decision_id))


class LawEnforcementRequests(Resource):

    def get(self, options: Union[str, Mapping, None] = None) -> Any:
        """
        Get one law enforcement request or a page of them.

        Args:
            options: A law enforcement request id, or a mapping with
                optional ``startAt`` and ``limit`` pagination values.
                Values that are not numbers are left out of the query.

        Returns:
            A single request for an id, otherwise a list of requests
        """
        if isinstance(options, str):
            return self._client.request(
                'GET', PATH_LAW_ENFORCEMENT_REQUEST.format(request_id=options)
            )

        params: Dict[str, str] = {}
        if isinstance(options, Mapping):
            for key in ('startAt', 'limit'):
                value = parse_int(options.get(key))
                if value is not None:
                    params[key] = str(value)

        return self._client.request('GET', PATH_LAW_ENFORCEMENT_REQUESTS, params=params or None)

    def add(self, law_enforcement_request_file: Union[bytes, BinaryIO],
            filename: str = DEFAULT_UPLOAD_FILENAME) -> Any:
        """
        Submit a new law enforcement request. Only PDFs are accepted.

        Args:
            law_enforcement_request_file: PDF contents or a binary file object
            filename: File name reported in the upload
        """
        if not law_enforcement_request_file:
            raise ValidationError("law enforcement request file is missing")

        files = {
            UPLOAD_FIELD_NAME: (filename, law_enforcement_request_file, UPLOAD_CONTENT_TYPE)
        }
        return self._client.request('POST', PATH_LAW_ENFORCEMENT_REQUEST_NEW, files=files)

    def update(self, law_enforcement_request: Mapping) -> Any:
        """Update a law enforcement request; the payload must carry its ``id``."""
        if not isinstance(law_enforcement_request, Mapping) or not law_enforcement_request.get('id'):
            raise ValidationError("id is missing")

        path = PATH_LAW_ENFORCEMENT_REQUEST.format(request_id=law_enforcement_request['id'])
        return self._client.request('PUT', path, json_data=law_enforcement_request)

    def delete(self, law_enforcement_request_id: str) -> Any:
        if not law_enforcement_request_id:
            raise ValidationError("id is missing")

        path = PATH_LAW_ENFORCEMENT_REQUEST.format(request_id=law_enforcement_request_id)
        return self._client.request('DELETE', path)


class Me(Resource):

    def get(self) -> Any:
        """Get data about the current user."""
        return self._client.request('GET', PATH_ME)


class Schema(Resource):

    def get(self) -> Any:
        return self._client.request('GET', PATH_SCHEMA)

    def update(self, schema: Mapping) -> Any:
        """Replace the account schema."""
        if not isinstance(schema, Mapping):
            raise ValidationError("schema must be an object")
        return self._client.request('PUT', PATH_SCHEMA, json_data=schema)
