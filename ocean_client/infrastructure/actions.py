"""HTTP implementation of the ActionsService port."""

from typing import List, Optional, Tuple

from ..application.domain import Action, ListOptions
from ..application.exceptions import InvalidRequest
from ..application.ports import ActionsService

from .api_models import ActionRoot, ActionsRoot
from .base_client import BaseService, add_options, build_path
from .response import Response

_ACTIONS_PATH = "/v2/actions"


class HttpActionsService(BaseService, ActionsService):
    """Reads the account's action history via the HTTP API."""

    async def list(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[Action], Response]:
        path = add_options(_ACTIONS_PATH, options)
        root, response = await self._call("GET", path, root=ActionsRoot)
        return root.actions, response

    async def get(self, action_id: int) -> Tuple[Action, Response]:
        """
        Fetches a single action.

        Raises:
            InvalidRequest: If the id is not a positive integer.
        """

        if action_id < 1:
            raise InvalidRequest("action_id cannot be less than 1")

        path = build_path(_ACTIONS_PATH + "/{id}", id=action_id)
        root, response = await self._call("GET", path, root=ActionRoot)
        return root.action, response
