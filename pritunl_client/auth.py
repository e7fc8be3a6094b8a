"""
Pritunl API request signing.

Every API call carries a token, a Unix timestamp, a one-time nonce and a
signature over ``token&timestamp&nonce&METHOD&path``. The query string and
the request body are not part of the signed string.
"""

import base64
import hashlib
import hmac
import time
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from .constants import (
    AUTH_STRING_SEPARATOR,
    HEADER_AUTH_NONCE,
    HEADER_AUTH_SIGNATURE,
    HEADER_AUTH_TIMESTAMP,
    HEADER_AUTH_TOKEN,
)
from .models import Credentials


@dataclass(frozen=True)
class AuthContext:
    """Authentication values for a single request."""

    token: str
    timestamp: str
    nonce: str
    signature: str

    def headers(self) -> Dict[str, str]:
        return {
            HEADER_AUTH_TOKEN: self.token,
            HEADER_AUTH_TIMESTAMP: self.timestamp,
            HEADER_AUTH_NONCE: self.nonce,
            HEADER_AUTH_SIGNATURE: self.signature,
        }


def new_timestamp() -> str:
    """Current time as decimal Unix seconds."""
    return str(int(time.time()))


def new_nonce() -> str:
    """Random 32 character hex identifier."""
    return uuid.uuid4().hex


def canonical_string(token: str, timestamp: str, nonce: str, method: str, path: str) -> str:
    """Build the exact string the server signs."""
    return AUTH_STRING_SEPARATOR.join([token, timestamp, nonce, method, path])


def compute_signature(secret: str, canonical: str) -> str:
    """
    Generate the request signature.

    Args:
        secret: API secret
        canonical: Output of canonical_string()

    Returns:
        Base64 encoded HMAC-SHA256 digest
    """
    mac = hmac.new(
        secret.encode('utf-8'),
        canonical.encode('utf-8'),
        hashlib.sha256
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def sign(credentials: Credentials, method: str, path: str,
         timestamp: Optional[str] = None, nonce: Optional[str] = None) -> AuthContext:
    """
    Sign a request for the given credentials.

    Timestamp and nonce are generated fresh unless supplied.

    Args:
        credentials: Host, token and secret
        method: Upper case HTTP verb
        path: URL path starting with '/'
        timestamp: Unix seconds as a string
        nonce: One-time identifier

    Returns:
        AuthContext holding the header values
    """
    if timestamp is None:
        timestamp = new_timestamp()
    if nonce is None:
        nonce = new_nonce()

    canonical = canonical_string(credentials.token, timestamp, nonce, method, path)
    signature = compute_signature(credentials.secret, canonical)

    return AuthContext(credentials.token, timestamp, nonce, signature)
