"""
Pritunl API Client Library

A Python client library that sends HMAC-signed requests to the Pritunl
VPN server API and decodes its JSON responses.

Example usage:
    from pritunl_client import Credentials, PritunlClient

    credentials = Credentials("vpn.example.com", "api-token", "api-secret")
    with PritunlClient(credentials) as client:
        users = {}
        client.get("/key/users", query={"org": org_id}, out=users)
"""

from .auth import AuthContext, canonical_string, compute_signature, sign
from .client import PritunlClient
from .exceptions import (
    PritunlClientError,
    ConfigurationError,
    InvalidRequestError,
    SerializationError,
    RequestError,
    BodyReadError,
    ParseError
)
from .constants import (
    HEADER_AUTH_TOKEN,
    HEADER_AUTH_TIMESTAMP,
    HEADER_AUTH_NONCE,
    HEADER_AUTH_SIGNATURE,
    DEFAULT_CONFIG
)
from .models import Credentials, RequestSpec

__version__ = "1.0.0"
__all__ = [
    "PritunlClient",
    "Credentials",
    "RequestSpec",
    "AuthContext",
    "canonical_string",
    "compute_signature",
    "sign",
    "PritunlClientError",
    "ConfigurationError",
    "InvalidRequestError",
    "SerializationError",
    "RequestError",
    "BodyReadError",
    "ParseError",
    "HEADER_AUTH_TOKEN",
    "HEADER_AUTH_TIMESTAMP",
    "HEADER_AUTH_NONCE",
    "HEADER_AUTH_SIGNATURE",
    "DEFAULT_CONFIG"
]
