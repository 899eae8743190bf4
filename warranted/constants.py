"""
Constants for the Warranted client library.
"""

# Header carrying the HMAC of inbound webhook requests
HEADER_WARRANTED_SIGNATURE = "X-Warranted-Signature"

DEFAULT_HOST = "https://app.warranted.io"
DEFAULT_ALGORITHM = "sha256"

# Default configuration values
DEFAULT_CONFIG = {
    'host': DEFAULT_HOST,
    'headers': {},
    'timeout': 30,              # HTTP timeout in seconds
}

# API paths
PATH_DECISION = "/api/v1/decisions/{decision_id}"
PATH_LAW_ENFORCEMENT_REQUESTS = "/api/v1/lawEnforcementRequests"
PATH_LAW_ENFORCEMENT_REQUEST = "/api/v1/lawEnforcementRequests/{request_id}"
PATH_LAW_ENFORCEMENT_REQUEST_NEW = "/api/v1/lawEnforcementRequest/new"
PATH_ME = "/api/v1/me"
PATH_SCHEMA = "/api/v1/schema"

DECISION_ID_PREFIX = "decision-"

# Multipart field name expected by the upload endpoint (spelling is the server's)
UPLOAD_FIELD_NAME = "lawEncforementRequest"
UPLOAD_CONTENT_TYPE = "application/pdf"
DEFAULT_UPLOAD_FILENAME = "lawEnforcementRequest.pdf"
