"""
Custom exceptions for the Pritunl API client.
"""


class PritunlClientError(Exception):
    """Base exception for Pritunl client errors."""
    pass


class ConfigurationError(PritunlClientError):
    """Raised when credentials or client configuration are invalid."""
    pass


class InvalidRequestError(PritunlClientError):
    """Raised when a request description is malformed."""
    pass


class SerializationError(PritunlClientError):
    """Raised when a request payload cannot be encoded as JSON."""
    pass


class RequestError(PritunlClientError):
    """
    Raised on transport failure or an unexpected response status.

    ``status_code`` is None when no response was received.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class BodyReadError(PritunlClientError):
    """Raised when the response body cannot be read."""
    pass


class ParseError(PritunlClientError):
    """Raised when the response body cannot be decoded into the target."""
    pass
