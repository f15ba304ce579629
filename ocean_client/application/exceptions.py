"""
Core exceptions for the API client.

This module defines a hierarchy of custom exceptions to allow for granular
error handling and clear separation of failure domains.
"""


class OceanClientError(Exception):
    """Base exception for all client-specific errors."""
    pass


# --- Configuration Errors ---

class ConfigurationError(OceanClientError):
    """Raised for errors related to client configuration."""
    pass


# --- Infrastructure Errors ---

class InfrastructureError(OceanClientError):
    """Base class for errors related to the HTTP exchange with the API."""
    pass


class InvalidRequest(InfrastructureError):
    """Raised when a request URL cannot be built, before any network I/O."""
    pass


class EncodingError(InfrastructureError):
    """Raised when a request body cannot be serialized to JSON."""
    pass


class TransportError(InfrastructureError):
    """
    Raised for network-level failures (DNS, refused connection, timeout).

    The underlying httpx exception is kept as ``__cause__``.
    """
    pass


class APIError(InfrastructureError):
    """
    Raised when the API answers with a non-success status code.

    Attributes:
        status_code: The HTTP status code of the response.
        error_id: The machine-readable error id from the body, if any.
        message: The human-readable message from the body, if any.
        request_id: The request id reported by the API, if any.
        response: The Response wrapper, so rate limits stay inspectable.
    """

    def __init__(
        self,
        status_code,
        message=None,
        error_id=None,
        request_id=None,
        response=None,
        method=None,
        url=None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_id = error_id
        self.request_id = request_id
        self.response = response
        self.method = method
        self.url = url
        super().__init__(self._format())

    def _format(self) -> str:
        text = f"{self.method} {self.url}: {self.status_code}"
        if self.request_id:
            text += f" (request \"{self.request_id}\")"
        if self.message:
            text += f" {self.message}"
        return text


class DecodeError(InfrastructureError):
    """
    Raised when a success response body does not match the expected envelope.

    Attributes:
        excerpt: The start of the offending body, for diagnosis.
        response: The Response wrapper of the failed call.
    """

    def __init__(self, message: str, excerpt: str = "", response=None):
        self.excerpt = excerpt
        self.response = response
        super().__init__(f"{message} (body: {excerpt!r})")
