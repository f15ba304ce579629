"""HTTP implementations of the StorageService and StorageActionsService ports."""

from typing import List, Optional, Tuple

from ..application.domain import *
from ..application.ports import StorageActionsService, StorageService

from .api_models import (
    ActionRoot,
    ActionsRoot,
    SnapshotRoot,
    SnapshotsRoot,
    VolumeRoot,
    VolumesRoot,
)
from .base_client import BaseService, add_options, build_path
from .response import Response

_VOLUMES_PATH = "/v2/volumes"
_VOLUME_PATH = _VOLUMES_PATH + "/{id}"
_VOLUME_SNAPSHOTS_PATH = _VOLUME_PATH + "/snapshots"
_VOLUME_ACTIONS_PATH = _VOLUME_PATH + "/actions"
_VOLUME_ACTION_PATH = _VOLUME_ACTIONS_PATH + "/{action_id}"
_SNAPSHOT_PATH = "/v2/snapshots/{id}"


class HttpStorageService(BaseService, StorageService):
    """Manages block storage volumes and snapshots via the HTTP API."""

    async def list_volumes(
        self, params: Optional[ListVolumeParams] = None
    ) -> Tuple[List[Volume], Response]:
        """
        Lists volumes, optionally filtered by name and/or region.

        Args:
            params: Filters and pagination; None for the server defaults.
        """

        path = add_options(_VOLUMES_PATH, params)
        root, response = await self._call("GET", path, root=VolumesRoot)
        return root.volumes, response

    async def get_volume(self, volume_id: str) -> Tuple[Volume, Response]:
        path = build_path(_VOLUME_PATH, id=volume_id)
        root, response = await self._call("GET", path, root=VolumeRoot)
        return root.volume, response

    async def create_volume(
        self, request: VolumeCreateRequest
    ) -> Tuple[Volume, Response]:
        self.logger.info(f"Creating volume {request.name!r}...")
        root, response = await self._call(
            "POST", _VOLUMES_PATH, request, root=VolumeRoot
        )
        return root.volume, response

    async def delete_volume(self, volume_id: str) -> Response:
        self.logger.info(f"Deleting volume {volume_id}...")
        path = build_path(_VOLUME_PATH, id=volume_id)
        _, response = await self._call("DELETE", path)
        return response

    async def list_snapshots(
        self, volume_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[Snapshot], Response]:
        path = build_path(_VOLUME_SNAPSHOTS_PATH, id=volume_id)
        root, response = await self._call(
            "GET", add_options(path, options), root=SnapshotsRoot
        )
        return root.snapshots, response

    async def get_snapshot(
        self, snapshot_id: str
    ) -> Tuple[Snapshot, Response]:
        path = build_path(_SNAPSHOT_PATH, id=snapshot_id)
        root, response = await self._call("GET", path, root=SnapshotRoot)
        return root.snapshot, response

    async def create_snapshot(
        self, request: SnapshotCreateRequest
    ) -> Tuple[Snapshot, Response]:
        """Snapshots the volume named by ``request.volume_id``."""
        self.logger.info(
            f"Creating snapshot {request.name!r} of volume {request.volume_id}..."
        )
        path = build_path(_VOLUME_SNAPSHOTS_PATH, id=request.volume_id)
        root, response = await self._call(
            "POST", path, request, root=SnapshotRoot
        )
        return root.snapshot, response

    async def delete_snapshot(self, snapshot_id: str) -> Response:
        self.logger.info(f"Deleting snapshot {snapshot_id}...")
        path = build_path(_SNAPSHOT_PATH, id=snapshot_id)
        _, response = await self._call("DELETE", path)
        return response


class HttpStorageActionsService(BaseService, StorageActionsService):
    """Attaches, detaches and resizes volumes via the HTTP API."""

    async def _do_action(
        self, volume_id: str, request: VolumeActionRequest
    ) -> Tuple[Action, Response]:
        self.logger.info(f"Requesting {request.type} of volume {volume_id}...")
        path = build_path(_VOLUME_ACTIONS_PATH, id=volume_id)
        root, response = await self._call(
            "POST", path, request, root=ActionRoot
        )
        return root.action, response

    async def attach(
        self, volume_id: str, droplet_id: int
    ) -> Tuple[Action, Response]:
        return await self._do_action(
            volume_id, VolumeActionRequest(type="attach", droplet_id=droplet_id)
        )

    async def detach_by_droplet_id(
        self, volume_id: str, droplet_id: int
    ) -> Tuple[Action, Response]:
        return await self._do_action(
            volume_id, VolumeActionRequest(type="detach", droplet_id=droplet_id)
        )

    async def resize(
        self, volume_id: str, size_gigabytes: int, region_slug: str
    ) -> Tuple[Action, Response]:
        request = VolumeActionRequest(
            type="resize", size_gigabytes=size_gigabytes, region=region_slug
        )
        return await self._do_action(volume_id, request)

    async def get(
        self, volume_id: str, action_id: int
    ) -> Tuple[Action, Response]:
        path = build_path(
            _VOLUME_ACTION_PATH, id=volume_id, action_id=action_id
        )
        root, response = await self._call("GET", path, root=ActionRoot)
        return root.action, response

    async def list(
        self, volume_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[Action], Response]:
        path = build_path(_VOLUME_ACTIONS_PATH, id=volume_id)
        root, response = await self._call(
            "GET", add_options(path, options), root=ActionsRoot
        )
        return root.actions, response
