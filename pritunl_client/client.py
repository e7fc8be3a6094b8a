"""
Signed request client for the Pritunl API.

This module sends HMAC signed requests to a Pritunl server and decodes its
JSON responses into caller supplied containers.
"""

import json
import logging
import os
from typing import Any, Mapping, Optional

import requests

from .auth import sign
from .constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    ENV_INSECURE,
    PASSTHROUGH_STATUSES
)
from .exceptions import (
    BodyReadError,
    ConfigurationError,
    ParseError,
    RequestError,
    SerializationError
)
from .models import Credentials, RequestSpec

logger = logging.getLogger(__name__)


class PritunlClient:
    """
    Client for making authenticated requests to a Pritunl server.

    One client holds one requests session and may be shared between
    threads; every call signs with its own timestamp and nonce.
    """

    def __init__(self, credentials: Credentials, **config):
        """
        Initialize Pritunl client.

        Args:
            credentials: Server host and API key pair
            **config: Configuration options (timeout, verify_tls)
        """
        self.credentials = credentials

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        if self.config['verify_tls'] is False:
            logger.warning(
                "TLS certificate verification is disabled for %s",
                self.credentials.host
            )

        # Create HTTP session
        self.session = requests.Session()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **config) -> "PritunlClient":
        """
        Build a client from PRITUNL_* environment variables.

        PRITUNL_INSECURE=1 disables certificate verification unless
        verify_tls is passed explicitly.
        """
        if environ is None:
            environ = os.environ

        credentials = Credentials.from_env(environ)

        insecure = environ.get(ENV_INSECURE, '').strip().lower()
        if 'verify_tls' not in config and insecure in ('1', 'true', 'yes'):
            config['verify_tls'] = False

        return cls(credentials, **config)

    def _validate_config(self):
        """Validate client configuration."""
        if not isinstance(self.credentials, Credentials):
            raise ConfigurationError("credentials must be a Credentials instance")

        unknown = set(self.config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown options: {', '.join(sorted(unknown))}")

        timeout = self.config['timeout']
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        verify = self.config['verify_tls']
        if not isinstance(verify, bool) and not (isinstance(verify, str) and verify):
            raise ConfigurationError("verify_tls must be a bool or a CA bundle path")

    def _build_url(self, path: str) -> str:
        return f"https://{self.credentials.host}{path}"

    def _serialize_payload(self, payload: Any) -> bytes:
        """Encode payload as compact JSON."""
        try:
            return json.dumps(payload, separators=(',', ':'), allow_nan=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise SerializationError(f"request: Json marshal error: {e}") from e

    def _read_body(self, response: requests.Response) -> bytes:
        try:
            return response.content
        except (requests.RequestException, OSError) as e:
            raise BodyReadError(f"request: Failed to read response body: {e}") from e

    def do(self, spec: RequestSpec, out: Any = None) -> requests.Response:
        """
        Sign and send a request, optionally decoding the JSON response.

        401 and 404 responses are returned without raising so the caller
        can branch on ``response.status_code``; ``out`` is left untouched
        for them, and a failed read of their body is only logged. Bodies
        are read before the response is closed, so ``response.content``
        and ``response.json()`` remain usable.

        Args:
            spec: Method, path, query and payload
            out: dict, list or object to fill from a 2xx JSON body

        Returns:
            requests.Response object

        Raises:
            SerializationError: If the payload cannot be encoded
            RequestError: On transport failure or an unexpected status
            BodyReadError: If a 2xx response body cannot be read
            ParseError: If the body cannot be decoded into ``out``
        """
        auth = sign(self.credentials, spec.method, spec.path)

        body = None
        if spec.has_body:
            body = self._serialize_payload(spec.payload)

        url = self._build_url(spec.path)

        headers = auth.headers()
        if body is not None:
            headers['Content-Type'] = CONTENT_TYPE_JSON

        logger.debug("Sending request: %s %s query=%s", spec.method, url, spec.query)

        try:
            response = self.session.request(
                spec.method,
                url,
                params=spec.query,
                data=body,
                headers=headers,
                timeout=self.config['timeout'],
                verify=self.config['verify_tls'],
                stream=True
            )
        except requests.RequestException as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise RequestError(f"request: Request error: {e}") from e

        try:
            return self._handle_response(response, out)
        finally:
            response.close()

    def _handle_response(self, response: requests.Response, out: Any) -> requests.Response:
        status = response.status_code
        logger.debug("Received response: %d %s", status, response.url)

        passthrough = status in PASSTHROUGH_STATUSES
        if not passthrough and not 200 <= status <= 299:
            raise RequestError(f"request: Bad response status {status}", status_code=status)

        if passthrough:
            # body is kept for the caller but never decoded or raised on
            try:
                self._read_body(response)
            except BodyReadError as e:
                logger.debug("Discarding unreadable %d response body: %s", status, e)
            return response

        content = self._read_body(response)

        if out is None:
            return response

        try:
            decoded = json.loads(content)
        except ValueError as e:
            raise ParseError(f"request: Failed to parse response: {e}") from e

        _populate(out, decoded)
        logger.debug("Decoded response into %s", type(out).__name__)
        return response

    def get(self, path: str, query=None, out=None) -> requests.Response:
        """Make authenticated GET request."""
        return self.do(RequestSpec('GET', path, query=query), out)

    def post(self, path: str, payload=None, query=None, out=None) -> requests.Response:
        """Make authenticated POST request."""
        return self.do(RequestSpec('POST', path, query=query, payload=payload), out)

    def put(self, path: str, payload=None, query=None, out=None) -> requests.Response:
        """Make authenticated PUT request."""
        return self.do(RequestSpec('PUT', path, query=query, payload=payload), out)

    def delete(self, path: str, query=None, out=None) -> requests.Response:
        """Make authenticated DELETE request."""
        return self.do(RequestSpec('DELETE', path, query=query), out)

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


def _populate(target: Any, decoded: Any):
    """Write a decoded JSON value into target in place."""
    if isinstance(target, dict):
        if not isinstance(decoded, dict):
            raise ParseError(f"request: Cannot decode {type(decoded).__name__} into dict")
        target.update(decoded)
    elif isinstance(target, list):
        if not isinstance(decoded, list):
            raise ParseError(f"request: Cannot decode {type(decoded).__name__} into list")
        target[:] = decoded
    else:
        if not isinstance(decoded, dict):
            raise ParseError(
                f"request: Cannot decode {type(decoded).__name__} into {type(target).__name__}"
            )
        fields = _declared_fields(target)
        for key, value in decoded.items():
            # unknown and private keys are ignored
            if key.startswith('_') or key not in fields:
                continue
            try:
                setattr(target, key, value)
            except AttributeError as e:
                raise ParseError(f"request: Cannot set {key!r} on {type(target).__name__}") from e


def _declared_fields(target: Any) -> set:
    """Instance attributes and class annotations of target, never methods."""
    fields = set(getattr(target, '__dict__', {}))
    for cls in type(target).__mro__:
        fields.update(getattr(cls, '__annotations__', {}))
    return fields
