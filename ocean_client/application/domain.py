"""
This module defines the core domain models of the client.

Resource entities and request bodies are pydantic models that mirror the
documented JSON schema of the API: attribute names are Pythonic, wire names
are declared as aliases, and every field the API may omit or null defaults
to None. Request options are plain dataclasses translated into query
strings.
"""

import dataclasses
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _as_utc(value: datetime) -> datetime:
    """Normalize an aware timestamp to UTC, treating naive ones as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class ApiModel(BaseModel):
    """Base for every wire shape: fields accept both alias and name."""

    model_config = ConfigDict(populate_by_name=True)


class RequestBody(ApiModel):
    """Base for JSON request bodies."""

    def to_wire(self) -> Dict[str, Any]:
        """Dump by wire name, leaving out every unset (None) field."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Shared ---

class Region(ApiModel):
    """A datacenter region, as embedded in actions and volumes."""

    slug: Optional[str] = None
    name: Optional[str] = None
    sizes: Optional[List[str]] = None
    available: Optional[bool] = None
    features: Optional[List[str]] = None


class Action(ApiModel):
    """An asynchronous operation performed on a resource."""

    id: Optional[int] = None
    status: Optional[str] = None
    type: Optional[str] = None
    started_at: Optional[UtcDatetime] = None
    completed_at: Optional[UtcDatetime] = None
    resource_id: Optional[int] = None
    resource_type: Optional[str] = None
    region: Optional[Region] = None
    region_slug: Optional[str] = None


# --- Databases ---

class DatabaseConnection(ApiModel):
    uri: Optional[str] = None
    database: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    ssl: Optional[bool] = None


class DatabaseUser(ApiModel):
    name: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None


class DatabaseMaintenanceWindow(ApiModel):
    """
    The weekly window in which automatic maintenance may run.

    ``description`` is null unless maintenance is pending.
    """

    day: Optional[str] = None
    hour: Optional[str] = None
    pending: Optional[bool] = None
    description: Optional[str] = None


class DatabaseBackup(ApiModel):
    created_at: Optional[UtcDatetime] = None
    size_gigabytes: Optional[float] = None


class DatabaseDB(ApiModel):
    """A logical database inside a cluster."""

    name: Optional[str] = None


class DatabasePool(ApiModel):
    """A connection pool in front of a PostgreSQL cluster."""

    user: Optional[str] = None
    name: Optional[str] = None
    size: Optional[int] = None
    database: Optional[str] = Field(default=None, alias="db")
    mode: Optional[str] = None
    connection: Optional[DatabaseConnection] = None
    private_connection: Optional[DatabaseConnection] = None


class DatabaseReplica(ApiModel):
    """A read-only replica of a cluster."""

    name: Optional[str] = None
    connection: Optional[DatabaseConnection] = None
    private_connection: Optional[DatabaseConnection] = None
    region: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[UtcDatetime] = None
    private_network_uuid: Optional[str] = None
    tags: Optional[List[str]] = None


class Database(ApiModel):
    """
    A managed database cluster.

    The connection details and the maintenance window are owned by the
    cluster record; either may be null while the cluster is provisioning.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    engine_slug: Optional[str] = Field(default=None, alias="engine")
    version_slug: Optional[str] = Field(default=None, alias="version")
    connection: Optional[DatabaseConnection] = None
    private_connection: Optional[DatabaseConnection] = None
    users: Optional[List[DatabaseUser]] = None
    num_nodes: Optional[int] = None
    size_slug: Optional[str] = Field(default=None, alias="size")
    db_names: Optional[List[str]] = None
    region_slug: Optional[str] = Field(default=None, alias="region")
    status: Optional[str] = None
    maintenance_window: Optional[DatabaseMaintenanceWindow] = None
    created_at: Optional[UtcDatetime] = None
    private_network_uuid: Optional[str] = None
    tags: Optional[List[str]] = None


class DatabaseCreateRequest(RequestBody):
    name: Optional[str] = None
    engine_slug: Optional[str] = Field(default=None, alias="engine")
    version: Optional[str] = None
    size_slug: Optional[str] = Field(default=None, alias="size")
    region: Optional[str] = None
    num_nodes: Optional[int] = None
    private_network_uuid: Optional[str] = None
    tags: Optional[List[str]] = None


class DatabaseResizeRequest(RequestBody):
    size_slug: Optional[str] = Field(default=None, alias="size")
    num_nodes: Optional[int] = None


class DatabaseMigrateRequest(RequestBody):
    region: Optional[str] = None
    private_network_uuid: Optional[str] = None


class DatabaseUpdateMaintenanceRequest(RequestBody):
    day: Optional[str] = None
    hour: Optional[str] = None


class DatabaseCreateUserRequest(RequestBody):
    name: Optional[str] = None


class DatabaseCreateDBRequest(RequestBody):
    name: Optional[str] = None


class DatabaseCreatePoolRequest(RequestBody):
    user: Optional[str] = None
    name: Optional[str] = None
    size: Optional[int] = None
    database: Optional[str] = Field(default=None, alias="db")
    mode: Optional[str] = None


class DatabaseCreateReplicaRequest(RequestBody):
    name: Optional[str] = None
    region: Optional[str] = None
    size: Optional[str] = None
    private_network_uuid: Optional[str] = None
    tags: Optional[List[str]] = None


# --- Container registry ---

class Registry(ApiModel):
    name: Optional[str] = None
    created_at: Optional[UtcDatetime] = None


class RepositoryTag(ApiModel):
    registry_name: Optional[str] = None
    repository: Optional[str] = None
    tag: Optional[str] = None
    manifest_digest: Optional[str] = None
    compressed_size_bytes: Optional[int] = None
    size_bytes: Optional[int] = None
    updated_at: Optional[UtcDatetime] = None


class RepositoryImage(RepositoryTag):
    """An image in a repository; same shape as a tag on the wire."""


class Repository(ApiModel):
    registry_name: Optional[str] = None
    name: Optional[str] = None
    latest_tag: Optional[RepositoryTag] = None
    tag_count: Optional[int] = None


class RegistryCreateRequest(RequestBody):
    name: Optional[str] = None


class RegistryDockerCredentialsRequest(RequestBody):
    """Selects read-only (the default) or read/write credentials."""

    read_write: bool = False


class RepositoryListImagesRequest(ApiModel):
    registry_name: str
    repository: str


class RepositoryListTagsRequest(ApiModel):
    registry_name: str
    repository: str


@dataclasses.dataclass(frozen=True)
class DockerCredentials:
    """The verbatim content of a Docker ``config.json`` file."""

    docker_config_json: bytes


# --- Block storage ---

class Volume(ApiModel):
    """
    A block storage volume.

    ``droplet_ids`` is absent for volumes that are not attached anywhere.
    """

    id: Optional[str] = None
    region: Optional[Region] = None
    name: Optional[str] = None
    size_gigabytes: Optional[int] = None
    description: Optional[str] = None
    droplet_ids: Optional[List[int]] = None
    created_at: Optional[UtcDatetime] = None
    filesystem_type: Optional[str] = None
    filesystem_label: Optional[str] = None
    tags: Optional[List[str]] = None


class Snapshot(ApiModel):
    """
    A point-in-time copy of a volume.

    The creation time is kept exactly as the API formats it.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    resource_id: Optional[str] = None
    resource_type: Optional[str] = None
    regions: Optional[List[str]] = None
    min_disk_size: Optional[int] = None
    size_gigabytes: Optional[float] = None
    created: Optional[str] = Field(default=None, alias="created_at")
    tags: Optional[List[str]] = None


class VolumeCreateRequest(RequestBody):
    region: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    size_gigabytes: Optional[int] = None
    snapshot_id: Optional[str] = None
    filesystem_type: Optional[str] = None
    filesystem_label: Optional[str] = None
    tags: Optional[List[str]] = None


class SnapshotCreateRequest(RequestBody):
    volume_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class VolumeActionRequest(RequestBody):
    """Body of a POST to a volume's actions endpoint."""

    type: str
    droplet_id: Optional[int] = None
    size_gigabytes: Optional[int] = None
    region: Optional[str] = None


# --- Request options ---

@dataclasses.dataclass(frozen=True)
class ListOptions:
    """Pagination parameters accepted by every list endpoint."""

    page: int = 0
    per_page: int = 0

    def to_query(self) -> Dict[str, Any]:
        """Return the set fields as query parameters; zero values are left out."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name)
        }


@dataclasses.dataclass(frozen=True)
class ListVolumeParams(ListOptions):
    """Volume listing filters on top of pagination."""

    region: str = ""
    name: str = ""
