"""Base class for the resource services and the path helpers they share."""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple
from urllib.parse import quote

import httpx

from ..application.domain import ListOptions
from ..application.exceptions import InvalidRequest

if TYPE_CHECKING:
    from .client import Client
    from .response import Response


def build_path(template: str, **params: Any) -> str:
    """Fill a path template, percent-encoding every parameter."""
    path = template
    for key, value in params.items():
        path = path.replace(f"{{{key}}}", quote(str(value), safe=""))
    return path


def add_query(path: str, params: Dict[str, Any]) -> str:
    """Merge query parameters into a relative path."""
    if not params:
        return path
    try:
        url = httpx.URL(path)
    except httpx.InvalidURL as e:
        raise InvalidRequest(f"Cannot parse path {path!r}: {e}") from e
    return str(url.copy_merge_params(params))


def add_options(path: str, options: Optional[ListOptions]) -> str:
    """Append the non-zero fields of a request options object to a path."""
    if options is None:
        return path
    return add_query(path, options.to_query())


class BaseService:
    """A base service that holds a back-reference to the shared client."""

    def __init__(self, client: "Client"):
        """
        Initializes the service.

        Args:
            client: The Client whose configuration and transport are used.
        """

        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    async def _call(
        self,
        method: str,
        path: str,
        body: Any = None,
        root: Optional[type] = None,
    ) -> Tuple[Any, "Response"]:
        """Build, send and decode one request."""
        request = self.client.new_request(method, path, body)
        return await self.client.do(request, root)
