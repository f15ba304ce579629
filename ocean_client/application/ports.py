"""
Ports (interfaces) for the API resource services.

Each port lists the operations one resource family supports. Every
operation performs a single request and returns the decoded payload with
the Response wrapper, or the Response alone when the API sends no payload.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

from .domain import *

if TYPE_CHECKING:
    from ..infrastructure.response import Response


class ActionsService(ABC):
    """A port for the account-wide action history."""

    @abstractmethod
    async def list(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[Action], "Response"]:
        """Lists actions, newest first."""
        pass

    @abstractmethod
    async def get(self, action_id: int) -> Tuple[Action, "Response"]:
        """Fetches a single action by id."""
        pass


class DatabasesService(ABC):
    """A port for managed database clusters."""

    @abstractmethod
    async def list(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[Database], "Response"]:
        pass

    @abstractmethod
    async def get(self, database_id: str) -> Tuple[Database, "Response"]:
        pass

    @abstractmethod
    async def create(
        self, request: DatabaseCreateRequest
    ) -> Tuple[Database, "Response"]:
        pass

    @abstractmethod
    async def delete(self, database_id: str) -> "Response":
        pass

    @abstractmethod
    async def resize(
        self, database_id: str, request: DatabaseResizeRequest
    ) -> "Response":
        pass

    @abstractmethod
    async def migrate(
        self, database_id: str, request: DatabaseMigrateRequest
    ) -> "Response":
        pass

    @abstractmethod
    async def update_maintenance(
        self, database_id: str, request: DatabaseUpdateMaintenanceRequest
    ) -> "Response":
        pass

    @abstractmethod
    async def list_backups(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseBackup], "Response"]:
        pass

    @abstractmethod
    async def list_users(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseUser], "Response"]:
        pass

    @abstractmethod
    async def get_user(
        self, database_id: str, user: str
    ) -> Tuple[DatabaseUser, "Response"]:
        pass

    @abstractmethod
    async def create_user(
        self, database_id: str, request: DatabaseCreateUserRequest
    ) -> Tuple[DatabaseUser, "Response"]:
        pass

    @abstractmethod
    async def delete_user(self, database_id: str, user: str) -> "Response":
        pass

    @abstractmethod
    async def list_dbs(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseDB], "Response"]:
        pass

    @abstractmethod
    async def get_db(
        self, database_id: str, name: str
    ) -> Tuple[DatabaseDB, "Response"]:
        pass

    @abstractmethod
    async def create_db(
        self, database_id: str, request: DatabaseCreateDBRequest
    ) -> Tuple[DatabaseDB, "Response"]:
        pass

    @abstractmethod
    async def delete_db(self, database_id: str, name: str) -> "Response":
        pass

    @abstractmethod
    async def list_pools(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabasePool], "Response"]:
        pass

    @abstractmethod
    async def get_pool(
        self, database_id: str, name: str
    ) -> Tuple[DatabasePool, "Response"]:
        pass

    @abstractmethod
    async def create_pool(
        self, database_id: str, request: DatabaseCreatePoolRequest
    ) -> Tuple[DatabasePool, "Response"]:
        pass

    @abstractmethod
    async def delete_pool(self, database_id: str, name: str) -> "Response":
        pass

    @abstractmethod
    async def list_replicas(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseReplica], "Response"]:
        pass

    @abstractmethod
    async def get_replica(
        self, database_id: str, name: str
    ) -> Tuple[DatabaseReplica, "Response"]:
        pass

    @abstractmethod
    async def create_replica(
        self, database_id: str, request: DatabaseCreateReplicaRequest
    ) -> Tuple[DatabaseReplica, "Response"]:
        pass

    @abstractmethod
    async def delete_replica(self, database_id: str, name: str) -> "Response":
        pass


class RegistryService(ABC):
    """A port for the account's container registry."""

    @abstractmethod
    async def create(
        self, request: RegistryCreateRequest
    ) -> Tuple[Registry, "Response"]:
        pass

    @abstractmethod
    async def get(self) -> Tuple[Registry, "Response"]:
        pass

    @abstractmethod
    async def delete(self) -> "Response":
        """Deletes the registry. This cannot be undone."""
        pass

    @abstractmethod
    async def docker_credentials(
        self, request: RegistryDockerCredentialsRequest
    ) -> Tuple[DockerCredentials, "Response"]:
        """Retrieves a Docker config file holding the registry credentials."""
        pass

    @abstractmethod
    async def list_repositories(
        self, registry: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[Repository], "Response"]:
        pass

    @abstractmethod
    async def list_repository_images(
        self,
        request: RepositoryListImagesRequest,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[RepositoryImage], "Response"]:
        pass

    @abstractmethod
    async def list_repository_tags(
        self,
        request: RepositoryListTagsRequest,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[RepositoryTag], "Response"]:
        pass

    @abstractmethod
    async def delete_tag(
        self, registry: str, repository: str, tag: str
    ) -> "Response":
        pass


class StorageService(ABC):
    """A port for block storage volumes and their snapshots."""

    @abstractmethod
    async def list_volumes(
        self, params: Optional[ListVolumeParams] = None
    ) -> Tuple[List[Volume], "Response"]:
        pass

    @abstractmethod
    async def get_volume(self, volume_id: str) -> Tuple[Volume, "Response"]:
        pass

    @abstractmethod
    async def create_volume(
        self, request: VolumeCreateRequest
    ) -> Tuple[Volume, "Response"]:
        pass

    @abstractmethod
    async def delete_volume(self, volume_id: str) -> "Response":
        pass

    @abstractmethod
    async def list_snapshots(
        self, volume_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[Snapshot], "Response"]:
        pass

    @abstractmethod
    async def get_snapshot(
        self, snapshot_id: str
    ) -> Tuple[Snapshot, "Response"]:
        pass

    @abstractmethod
    async def create_snapshot(
        self, request: SnapshotCreateRequest
    ) -> Tuple[Snapshot, "Response"]:
        pass

    @abstractmethod
    async def delete_snapshot(self, snapshot_id: str) -> "Response":
        pass


class StorageActionsService(ABC):
    """A port for actions performed on block storage volumes."""

    @abstractmethod
    async def attach(
        self, volume_id: str, droplet_id: int
    ) -> Tuple[Action, "Response"]:
        pass

    @abstractmethod
    async def detach_by_droplet_id(
        self, volume_id: str, droplet_id: int
    ) -> Tuple[Action, "Response"]:
        pass

    @abstractmethod
    async def resize(
        self, volume_id: str, size_gigabytes: int, region_slug: str
    ) -> Tuple[Action, "Response"]:
        pass

    @abstractmethod
    async def get(
        self, volume_id: str, action_id: int
    ) -> Tuple[Action, "Response"]:
        pass

    @abstractmethod
    async def list(
        self, volume_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[Action], "Response"]:
        pass
