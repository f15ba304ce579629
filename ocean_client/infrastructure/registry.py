"""HTTP implementation of the RegistryService port."""

from typing import List, Optional, Tuple

from ..application.domain import *
from ..application.ports import RegistryService

from .api_models import (
    RegistryRoot,
    RepositoriesRoot,
    RepositoryImagesRoot,
    RepositoryTagsRoot,
)
from .base_client import BaseService, add_options, add_query, build_path
from .response import Response

_REGISTRY_PATH = "/v2/registry"
_DOCKER_CREDENTIALS_PATH = _REGISTRY_PATH + "/docker-credentials"
_REPOSITORIES_PATH = _REGISTRY_PATH + "/{registry}/repositories"
_IMAGES_PATH = _REPOSITORIES_PATH + "/{repository}/images"
_TAGS_PATH = _REPOSITORIES_PATH + "/{repository}/tags"
_TAG_PATH = _TAGS_PATH + "/{tag}"

# Hostname of the registry, for use in image references.
REGISTRY_SERVER = "registry.digitalocean.com"


class HttpRegistryService(BaseService, RegistryService):
    """Manages the account's container registry via the HTTP API."""

    async def create(
        self, request: RegistryCreateRequest
    ) -> Tuple[Registry, Response]:
        self.logger.info(f"Creating registry {request.name!r}...")
        root, response = await self._call(
            "POST", _REGISTRY_PATH, request, root=RegistryRoot
        )
        return root.registry, response

    async def get(self) -> Tuple[Registry, Response]:
        root, response = await self._call(
            "GET", _REGISTRY_PATH, root=RegistryRoot
        )
        return root.registry, response

    async def delete(self) -> Response:
        self.logger.info("Deleting registry...")
        _, response = await self._call("DELETE", _REGISTRY_PATH)
        return response

    async def docker_credentials(
        self, request: RegistryDockerCredentialsRequest
    ) -> Tuple[DockerCredentials, Response]:
        """
        Retrieves a Docker config file containing the registry credentials.

        The body is not JSON-decoded: it is returned byte for byte, ready to
        be written out as ``~/.docker/config.json``.
        """

        path = add_query(
            _DOCKER_CREDENTIALS_PATH, {"read_write": request.read_write}
        )
        body, response = await self._call("GET", path, root=bytes)
        return DockerCredentials(docker_config_json=body), response

    async def list_repositories(
        self, registry: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[Repository], Response]:
        path = add_options(
            build_path(_REPOSITORIES_PATH, registry=registry), options
        )
        root, response = await self._call("GET", path, root=RepositoriesRoot)
        return root.repositories, response

    async def list_repository_images(
        self,
        request: RepositoryListImagesRequest,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[RepositoryImage], Response]:
        path = build_path(
            _IMAGES_PATH,
            registry=request.registry_name,
            repository=request.repository,
        )
        root, response = await self._call(
            "GET", add_options(path, options), root=RepositoryImagesRoot
        )
        return root.images, response

    async def list_repository_tags(
        self,
        request: RepositoryListTagsRequest,
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[RepositoryTag], Response]:
        path = build_path(
            _TAGS_PATH,
            registry=request.registry_name,
            repository=request.repository,
        )
        root, response = await self._call(
            "GET", add_options(path, options), root=RepositoryTagsRoot
        )
        return root.tags, response

    async def delete_tag(
        self, registry: str, repository: str, tag: str
    ) -> Response:
        self.logger.info(f"Deleting tag {registry}/{repository}:{tag}...")
        path = build_path(
            _TAG_PATH, registry=registry, repository=repository, tag=tag
        )
        _, response = await self._call("DELETE", path)
        return response
