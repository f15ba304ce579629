"""
Pydantic models for the JSON envelopes the API wraps its resources in.

A single resource lives under a singular key (``{"volume": {...}}``), a
collection under a plural key next to optional ``links`` and ``meta``
siblings. Envelopes only exist for the duration of one decode: the client
copies their payload and pagination data out and discards them.
"""

from typing import Annotated, List, Optional, TypeVar

import httpx
from pydantic import BaseModel, BeforeValidator, Field

from ..application.domain import (
    Action,
    Database,
    DatabaseBackup,
    DatabaseDB,
    DatabasePool,
    DatabaseReplica,
    DatabaseUser,
    Registry,
    Repository,
    RepositoryImage,
    RepositoryTag,
    Snapshot,
    Volume,
)

T = TypeVar("T")


def _none_as_empty(value):
    return [] if value is None else value


# A collection the API may send as null.
Items = Annotated[List[T], BeforeValidator(_none_as_empty)]


def page_number_from_url(url: Optional[str]) -> int:
    """
    Extract the ``page`` query parameter of a pagination link.

    Returns 0 when the link is missing or carries no usable page number;
    callers treat 0 as "no such page".
    """
    if not url:
        return 0
    try:
        page = httpx.URL(url).params.get("page")
        return int(page) if page is not None else 0
    except (httpx.InvalidURL, ValueError):
        return 0


class Pages(BaseModel):
    """The pagination URLs of a list response."""

    first: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None

    @property
    def first_page(self) -> int:
        return page_number_from_url(self.first)

    @property
    def prev_page(self) -> int:
        return page_number_from_url(self.prev)

    @property
    def next_page(self) -> int:
        return page_number_from_url(self.next)

    @property
    def last_page(self) -> int:
        return page_number_from_url(self.last)


class Links(BaseModel):
    """Represents the 'links' object of a list response."""

    pages: Optional[Pages] = None

    def current_page(self) -> int:
        """The page this response belongs to, derived from the previous link."""
        if self.pages is None or not self.pages.prev:
            return 1
        return self.pages.prev_page + 1

    def is_last_page(self) -> bool:
        """True when no further page follows this one."""
        if self.pages is None or not self.pages.last:
            return True
        return self.current_page() == self.pages.last_page


class Meta(BaseModel):
    """Represents the 'meta' object: the server-side size of the collection."""

    total: int = 0


class ErrorResponse(BaseModel):
    """The body the API sends along with a non-success status code."""

    id: Optional[str] = None
    message: Optional[str] = None
    request_id: Optional[str] = None


# --- Envelopes ---

class ListRoot(BaseModel):
    """Common siblings of every plural envelope."""

    links: Optional[Links] = None
    meta: Optional[Meta] = None


class ActionRoot(BaseModel):
    action: Action


class ActionsRoot(ListRoot):
    actions: Items[Action] = Field(default_factory=list)


class DatabaseRoot(BaseModel):
    database: Database


class DatabasesRoot(ListRoot):
    databases: Items[Database] = Field(default_factory=list)


class DatabaseBackupsRoot(ListRoot):
    backups: Items[DatabaseBackup] = Field(default_factory=list)


class DatabaseUserRoot(BaseModel):
    user: DatabaseUser


class DatabaseUsersRoot(ListRoot):
    users: Items[DatabaseUser] = Field(default_factory=list)


class DatabaseDBRoot(BaseModel):
    db: DatabaseDB


class DatabaseDBsRoot(ListRoot):
    dbs: Items[DatabaseDB] = Field(default_factory=list)


class DatabasePoolRoot(BaseModel):
    pool: DatabasePool


class DatabasePoolsRoot(ListRoot):
    pools: Items[DatabasePool] = Field(default_factory=list)


class DatabaseReplicaRoot(BaseModel):
    replica: DatabaseReplica


class DatabaseReplicasRoot(ListRoot):
    replicas: Items[DatabaseReplica] = Field(default_factory=list)


class RegistryRoot(BaseModel):
    registry: Registry


class RepositoriesRoot(ListRoot):
    repositories: Items[Repository] = Field(default_factory=list)


class RepositoryImagesRoot(ListRoot):
    images: Items[RepositoryImage] = Field(default_factory=list)


class RepositoryTagsRoot(ListRoot):
    tags: Items[RepositoryTag] = Field(default_factory=list)


class VolumeRoot(BaseModel):
    volume: Volume


class VolumesRoot(ListRoot):
    volumes: Items[Volume] = Field(default_factory=list)


class SnapshotRoot(BaseModel):
    snapshot: Snapshot


class SnapshotsRoot(ListRoot):
    snapshots: Items[Snapshot] = Field(default_factory=list)
