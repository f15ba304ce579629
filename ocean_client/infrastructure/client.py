"""HTTP client for the v2 API: configuration and the shared request pipeline."""

import json
import logging
from typing import Any, Callable, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..application.domain import RequestBody
from ..application.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    EncodingError,
    InvalidRequest,
    TransportError,
)

from .actions import HttpActionsService
from .api_models import ErrorResponse, ListRoot
from .databases import HttpDatabasesService
from .registry import HttpRegistryService
from .response import Response
from .storage import HttpStorageActionsService, HttpStorageService

LIBRARY_VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.digitalocean.com/"
DEFAULT_USER_AGENT = f"ocean-client/{LIBRARY_VERSION}"
MEDIA_TYPE = "application/json"
HEADER_REQUEST_ID = "x-request-id"

_EXCERPT_LENGTH = 200

RequestCompletedCallback = Callable[[httpx.Request, httpx.Response], None]


class Client:
    """
    Manages communication with the v2 API.

    The configuration (base URL, token, user agent, transport) is fixed at
    construction and shared read-only by every resource service, so a single
    client can serve concurrent calls.
    """

    def __init__(
        self,
        token: str,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: Optional[str] = None,
        on_request_completed: Optional[RequestCompletedCallback] = None,
    ):
        """
        Initializes the client and its resource services.

        Args:
            token: An API access token.
            http_client: The transport. One is created (and owned) if omitted.
            base_url: The API root the resource paths are resolved against.
            user_agent: Prepended to the library's own user agent.
            on_request_completed: Called with the request and the raw response
                                  after every completed exchange.

        Raises:
            ConfigurationError: If the token is missing or appears to be
                                a placeholder, or the base URL is invalid.
        """

        if not token or "YOUR_" in token.upper():
            raise ConfigurationError(
                f"API token for {self.__class__.__name__} is missing or is a "
                f"placeholder. Please check your config files."
            )

        try:
            self.base_url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid base URL {base_url!r}: {e}") from e

        self.token = token
        self.user_agent = (
            f"{user_agent} {DEFAULT_USER_AGENT}" if user_agent else DEFAULT_USER_AGENT
        )
        self.on_request_completed = on_request_completed
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient()
        self.logger = logging.getLogger(self.__class__.__name__)

        self.actions = HttpActionsService(self)
        self.databases = HttpDatabasesService(self)
        self.registry = HttpRegistryService(self)
        self.storage = HttpStorageService(self)
        self.storage_actions = HttpStorageActionsService(self)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport, if this client created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    def new_request(
        self, method: str, path: str, body: Any = None
    ) -> httpx.Request:
        """
        Build an API request.

        Args:
            method: The HTTP verb.
            path: A path relative to the base URL, query string included.
            body: A RequestBody or any JSON-serializable value, sent as JSON.

        Raises:
            InvalidRequest: If the path cannot be resolved against the base URL.
            EncodingError: If the body cannot be serialized.
        """

        try:
            url = self.base_url.join(path)
        except httpx.InvalidURL as e:
            raise InvalidRequest(f"Cannot resolve path {path!r}: {e}") from e

        headers = {
            "Accept": MEDIA_TYPE,
            "User-Agent": self.user_agent,
            "Authorization": f"Bearer {self.token}",
        }
        content = None
        if body is not None:
            content = self._encode_body(body)
            headers["Content-Type"] = MEDIA_TYPE

        return self.http_client.build_request(
            method, url, content=content, headers=headers
        )

    def _encode_body(self, body: Any) -> bytes:
        try:
            payload = body.to_wire() if isinstance(body, RequestBody) else body
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(
                f"Cannot encode {type(body).__name__} as JSON: {e}"
            ) from e

    async def do(
        self, request: httpx.Request, root: Optional[type] = None
    ) -> Tuple[Any, Response]:
        """
        Send a request and decode its response.

        Args:
            request: A request built by new_request.
            root: The envelope model to decode the body into; ``bytes`` to
                  return the body verbatim; None to ignore the body.

        Returns:
            The decoded envelope (or bytes, or None) and the Response wrapper.
            Links and meta of list envelopes are copied onto the wrapper.

        Raises:
            TransportError: If the request never got a response.
            APIError: If the API answered with a non-success status.
            DecodeError: If a success body does not match the envelope.
        """

        try:
            http_response = await self.http_client.send(request)
        except httpx.TransportError as e:
            raise TransportError(f"{request.method} {request.url}: {e}") from e

        response = Response.from_httpx(http_response)
        self.logger.debug(
            f"{request.method} {request.url} -> {http_response.status_code} "
            f"({response.rate})"
        )
        if self.on_request_completed is not None:
            self.on_request_completed(request, http_response)

        self._check_response(request, response)

        if root is None:
            return None, response
        if root is bytes:
            return http_response.content, response

        envelope = self._decode(root, response)
        if isinstance(envelope, ListRoot):
            response.links = envelope.links
            response.meta = envelope.meta
        return envelope, response

    def _check_response(self, request: httpx.Request, response: Response):
        """Raise APIError for any status outside the 2xx range."""
        http_response = response.http_response
        if http_response.is_success:
            return

        try:
            error = ErrorResponse.model_validate_json(http_response.content)
        except ValidationError:
            text = http_response.text[:_EXCERPT_LENGTH].strip()
            error = ErrorResponse(message=text or None)

        api_error = APIError(
            http_response.status_code,
            message=error.message,
            error_id=error.id,
            request_id=error.request_id
            or http_response.headers.get(HEADER_REQUEST_ID),
            response=response,
            method=request.method,
            url=str(request.url),
        )
        self.logger.warning(f"API error: {api_error}")
        raise api_error

    def _decode(self, root: type, response: Response):
        content = response.http_response.content
        try:
            return root.model_validate_json(content)
        except ValidationError as e:
            excerpt = content[:_EXCERPT_LENGTH].decode("utf-8", errors="replace")
            raise DecodeError(
                f"Response does not match {root.__name__}: "
                f"{e.error_count()} error(s)",
                excerpt=excerpt,
                response=response,
            ) from e
