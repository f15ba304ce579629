"""
Command-line entry point: fetches one page of a resource and prints it as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from .application.domain import (
    DockerCredentials,
    ListOptions,
    ListVolumeParams,
    RegistryDockerCredentialsRequest,
)
from .application.exceptions import OceanClientError
from .infrastructure.client import Client
from .infrastructure.containers import Container

logger = logging.getLogger(__name__)

RESOURCES = [
    "actions",
    "databases",
    "volumes",
    "snapshots",
    "registry",
    "docker-credentials",
]


def setup_logging(level: str):
    """Applies basic logging configuration."""
    logging.basicConfig(level=level)


async def fetch(client: Client, args: argparse.Namespace):
    """Runs the single API call selected on the command line."""

    options = ListOptions(page=args.page, per_page=args.per_page)

    if args.resource == "actions":
        return await client.actions.list(options)
    if args.resource == "databases":
        return await client.databases.list(options)
    if args.resource == "volumes":
        params = ListVolumeParams(
            page=args.page,
            per_page=args.per_page,
            name=args.name or "",
            region=args.region or "",
        )
        return await client.storage.list_volumes(params)
    if args.resource == "snapshots":
        return await client.storage.list_snapshots(args.volume_id, options)
    if args.resource == "registry":
        return await client.registry.get()
    return await client.registry.docker_credentials(
        RegistryDockerCredentialsRequest(read_write=args.read_write)
    )


def render(payload: Any) -> str:
    """Formats a decoded payload for stdout."""
    if isinstance(payload, DockerCredentials):
        return payload.docker_config_json.decode("utf-8", errors="replace")
    if isinstance(payload, list):
        items = [item.model_dump(mode="json", by_alias=True) for item in payload]
        return json.dumps(items, indent=2)
    return payload.model_dump_json(by_alias=True, indent=2)


async def run_application(args: argparse.Namespace, container: Container):
    """Wires and runs the requested call using the DI container."""

    try:
        client = container.client()
        payload, response = await fetch(client, args)
    except OceanClientError as e:
        logger.error(f"An application error occurred: {e}")
        sys.exit(1)
    finally:
        await container.http_client().aclose()

    logger.info(f"Rate limit: {response.rate}")
    if response.meta is not None:
        logger.info(f"Total results: {response.meta.total}")
    print(render(payload))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cloud API client")

    parser.add_argument(
        "resource",
        choices=RESOURCES,
        help="The resource to fetch.",
    )
    parser.add_argument("--page", type=int, default=0, help="Page to fetch.")
    parser.add_argument(
        "--per-page", type=int, default=0, help="Results per page."
    )
    parser.add_argument("--name", help="Volume name filter.")
    parser.add_argument("--region", help="Volume region filter.")
    parser.add_argument(
        "--volume-id",
        help="The volume whose snapshots to list (required for 'snapshots').",
    )
    parser.add_argument(
        "--read-write",
        action="store_true",
        help="Request read/write registry credentials.",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.resource == "snapshots" and not args.volume_id:
        parser.error("--volume-id is required for 'snapshots'")

    container = Container()
    setup_logging(level=container.config().logging.level)

    asyncio.run(run_application(args, container))


if __name__ == "__main__":
    main()
