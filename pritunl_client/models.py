"""
Request inputs: server credentials and per-call request descriptions.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .constants import ENV_HOST, ENV_SECRET, ENV_TOKEN
from .exceptions import ConfigurationError, InvalidRequestError


@dataclass(frozen=True)
class Credentials:
    """Pritunl host address and API key pair."""

    host: str
    token: str
    secret: str = field(repr=False)

    def __post_init__(self):
        for name in ('host', 'token', 'secret'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{name} cannot be empty")
        # frozen, so bypass __setattr__
        object.__setattr__(self, 'host', self.host.rstrip('/'))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Credentials":
        """
        Load credentials from PRITUNL_HOST, PRITUNL_TOKEN and PRITUNL_SECRET.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If any variable is missing or empty
        """
        if environ is None:
            environ = os.environ

        names = (ENV_HOST, ENV_TOKEN, ENV_SECRET)
        missing = [name for name in names if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"missing environment variables: {', '.join(missing)}"
            )

        return cls(environ[ENV_HOST], environ[ENV_TOKEN], environ[ENV_SECRET])


@dataclass
class RequestSpec:
    """One API call: verb, path, optional query parameters and JSON payload."""

    method: str
    path: str
    query: Optional[Mapping[str, Any]] = None
    payload: Any = None

    def __post_init__(self):
        if not isinstance(self.method, str) or not self.method.strip():
            raise InvalidRequestError("method cannot be empty")
        self.method = self.method.strip().upper()

        if not isinstance(self.path, str) or not self.path.startswith('/'):
            raise InvalidRequestError(f"path must begin with '/': {self.path!r}")

    @property
    def has_body(self) -> bool:
        return self.payload is not None
