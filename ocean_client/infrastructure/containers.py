"""
Dependency Injection container for the client.

This container uses the `dependency-injector` library to wire the HTTP
transport and the API client together from the Dynaconf settings.
"""

from dependency_injector import containers, providers
import httpx

from ..settings import settings

from .client import Client


class Container(containers.DeclarativeContainer):
    """DI container for wiring the client components."""

    config = providers.Object(settings)

    http_client = providers.Singleton(
        httpx.AsyncClient,
        timeout=config.provided.api.timeout,
    )

    client = providers.Singleton(
        Client,
        token=config.provided.api.token,
        http_client=http_client,
        base_url=config.provided.api.base_url,
        user_agent=config.provided.api.user_agent,
    )
