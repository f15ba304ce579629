"""HTTP implementation of the DatabasesService port."""

from typing import List, Optional, Tuple

from ..application.domain import *
from ..application.ports import DatabasesService

from .api_models import (
    DatabaseBackupsRoot,
    DatabaseDBRoot,
    DatabaseDBsRoot,
    DatabasePoolRoot,
    DatabasePoolsRoot,
    DatabaseReplicaRoot,
    DatabaseReplicasRoot,
    DatabaseRoot,
    DatabasesRoot,
    DatabaseUserRoot,
    DatabaseUsersRoot,
)
from .base_client import BaseService, add_options, build_path
from .response import Response

_DATABASES_PATH = "/v2/databases"
_DATABASE_PATH = _DATABASES_PATH + "/{id}"
_RESIZE_PATH = _DATABASE_PATH + "/resize"
_MIGRATE_PATH = _DATABASE_PATH + "/migrate"
_MAINTENANCE_PATH = _DATABASE_PATH + "/maintenance"
_BACKUPS_PATH = _DATABASE_PATH + "/backups"
_USERS_PATH = _DATABASE_PATH + "/users"
_USER_PATH = _USERS_PATH + "/{name}"
_DBS_PATH = _DATABASE_PATH + "/dbs"
_DB_PATH = _DBS_PATH + "/{name}"
_POOLS_PATH = _DATABASE_PATH + "/pools"
_POOL_PATH = _POOLS_PATH + "/{name}"
_REPLICAS_PATH = _DATABASE_PATH + "/replicas"
_REPLICA_PATH = _REPLICAS_PATH + "/{name}"


class HttpDatabasesService(BaseService, DatabasesService):
    """
    Manages database clusters and their users, databases, connection pools
    and replicas via the HTTP API.

    Long-running operations (create, resize, migrate) return as soon as the
    API has accepted them; polling for completion is up to the caller.
    """

    async def list(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[Database], Response]:
        path = add_options(_DATABASES_PATH, options)
        root, response = await self._call("GET", path, root=DatabasesRoot)
        return root.databases, response

    async def get(self, database_id: str) -> Tuple[Database, Response]:
        path = build_path(_DATABASE_PATH, id=database_id)
        root, response = await self._call("GET", path, root=DatabaseRoot)
        return root.database, response

    async def create(
        self, request: DatabaseCreateRequest
    ) -> Tuple[Database, Response]:
        self.logger.info(
            f"Creating {request.engine_slug} cluster {request.name!r}..."
        )
        root, response = await self._call(
            "POST", _DATABASES_PATH, request, root=DatabaseRoot
        )
        return root.database, response

    async def delete(self, database_id: str) -> Response:
        self.logger.info(f"Deleting database cluster {database_id}...")
        path = build_path(_DATABASE_PATH, id=database_id)
        _, response = await self._call("DELETE", path)
        return response

    async def resize(
        self, database_id: str, request: DatabaseResizeRequest
    ) -> Response:
        self.logger.info(
            f"Resizing database cluster {database_id} to {request.size_slug} "
            f"x{request.num_nodes}..."
        )
        path = build_path(_RESIZE_PATH, id=database_id)
        _, response = await self._call("PUT", path, request)
        return response

    async def migrate(
        self, database_id: str, request: DatabaseMigrateRequest
    ) -> Response:
        self.logger.info(
            f"Migrating database cluster {database_id} to {request.region}..."
        )
        path = build_path(_MIGRATE_PATH, id=database_id)
        _, response = await self._call("PUT", path, request)
        return response

    async def update_maintenance(
        self, database_id: str, request: DatabaseUpdateMaintenanceRequest
    ) -> Response:
        path = build_path(_MAINTENANCE_PATH, id=database_id)
        _, response = await self._call("PUT", path, request)
        return response

    async def list_backups(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseBackup], Response]:
        path = add_options(build_path(_BACKUPS_PATH, id=database_id), options)
        root, response = await self._call(
            "GET", path, root=DatabaseBackupsRoot
        )
        return root.backups, response

    # --- Users ---

    async def list_users(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseUser], Response]:
        path = add_options(build_path(_USERS_PATH, id=database_id), options)
        root, response = await self._call("GET", path, root=DatabaseUsersRoot)
        return root.users, response

    async def get_user(
        self, database_id: str, user: str
    ) -> Tuple[DatabaseUser, Response]:
        path = build_path(_USER_PATH, id=database_id, name=user)
        root, response = await self._call("GET", path, root=DatabaseUserRoot)
        return root.user, response

    async def create_user(
        self, database_id: str, request: DatabaseCreateUserRequest
    ) -> Tuple[DatabaseUser, Response]:
        path = build_path(_USERS_PATH, id=database_id)
        root, response = await self._call(
            "POST", path, request, root=DatabaseUserRoot
        )
        return root.user, response

    async def delete_user(self, database_id: str, user: str) -> Response:
        path = build_path(_USER_PATH, id=database_id, name=user)
        _, response = await self._call("DELETE", path)
        return response

    # --- Databases ---

    async def list_dbs(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseDB], Response]:
        path = add_options(build_path(_DBS_PATH, id=database_id), options)
        root, response = await self._call("GET", path, root=DatabaseDBsRoot)
        return root.dbs, response

    async def get_db(
        self, database_id: str, name: str
    ) -> Tuple[DatabaseDB, Response]:
        path = build_path(_DB_PATH, id=database_id, name=name)
        root, response = await self._call("GET", path, root=DatabaseDBRoot)
        return root.db, response

    async def create_db(
        self, database_id: str, request: DatabaseCreateDBRequest
    ) -> Tuple[DatabaseDB, Response]:
        path = build_path(_DBS_PATH, id=database_id)
        root, response = await self._call(
            "POST", path, request, root=DatabaseDBRoot
        )
        return root.db, response

    async def delete_db(self, database_id: str, name: str) -> Response:
        path = build_path(_DB_PATH, id=database_id, name=name)
        _, response = await self._call("DELETE", path)
        return response

    # --- Connection pools ---

    async def list_pools(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabasePool], Response]:
        path = add_options(build_path(_POOLS_PATH, id=database_id), options)
        root, response = await self._call("GET", path, root=DatabasePoolsRoot)
        return root.pools, response

    async def get_pool(
        self, database_id: str, name: str
    ) -> Tuple[DatabasePool, Response]:
        path = build_path(_POOL_PATH, id=database_id, name=name)
        root, response = await self._call("GET", path, root=DatabasePoolRoot)
        return root.pool, response

    async def create_pool(
        self, database_id: str, request: DatabaseCreatePoolRequest
    ) -> Tuple[DatabasePool, Response]:
        path = build_path(_POOLS_PATH, id=database_id)
        root, response = await self._call(
            "POST", path, request, root=DatabasePoolRoot
        )
        return root.pool, response

    async def delete_pool(self, database_id: str, name: str) -> Response:
        path = build_path(_POOL_PATH, id=database_id, name=name)
        _, response = await self._call("DELETE", path)
        return response

    # --- Replicas ---

    async def list_replicas(
        self, database_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[DatabaseReplica], Response]:
        path = add_options(build_path(_REPLICAS_PATH, id=database_id), options)
        root, response = await self._call(
            "GET", path, root=DatabaseReplicasRoot
        )
        return root.replicas, response

    async def get_replica(
        self, database_id: str, name: str
    ) -> Tuple[DatabaseReplica, Response]:
        path = build_path(_REPLICA_PATH, id=database_id, name=name)
        root, response = await self._call(
            "GET", path, root=DatabaseReplicaRoot
        )
        return root.replica, response

    async def create_replica(
        self, database_id: str, request: DatabaseCreateReplicaRequest
    ) -> Tuple[DatabaseReplica, Response]:
        self.logger.info(
            f"Creating replica {request.name!r} of cluster {database_id}..."
        )
        path = build_path(_REPLICAS_PATH, id=database_id)
        root, response = await self._call(
            "POST", path, request, root=DatabaseReplicaRoot
        )
        return root.replica, response

    async def delete_replica(self, database_id: str, name: str) -> Response:
        path = build_path(_REPLICA_PATH, id=database_id, name=name)
        _, response = await self._call("DELETE", path)
        return response
