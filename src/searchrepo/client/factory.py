"""Client factory — Builds ``AsyncOpenSearch`` clients and repositories from settings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from opensearchpy import AsyncOpenSearch

from searchrepo.config.settings import OpenSearchSettings, Settings
from searchrepo.models.page import Order
from searchrepo.repository.base import SearchRepository
from searchrepo.repository.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def client_kwargs(settings: OpenSearchSettings) -> dict[str, Any]:
    """Translate connection settings into ``AsyncOpenSearch`` keyword arguments."""
    if not settings.hosts:
        raise ConfigurationError("At least one OpenSearch host is required.")

    kwargs: dict[str, Any] = {
        "hosts": list(settings.hosts),
        "verify_certs": settings.verify_certs,
        "ssl_show_warn": False,
        "timeout": settings.timeout,
        "use_ssl": settings.hosts[0].startswith("https"),
    }
    if settings.username and settings.password:
        kwargs["http_auth"] = (settings.username, settings.password)

    kwargs.update(settings.extra)
    return kwargs


def create_client(settings: Settings | OpenSearchSettings) -> AsyncOpenSearch:
    """Create an ``AsyncOpenSearch`` client.

    No request is made here; connection problems surface on first use.
    """
    os_settings = settings.opensearch if isinstance(settings, Settings) else settings
    client = AsyncOpenSearch(**client_kwargs(os_settings))
    logger.info("Created OpenSearch client for hosts: %s", os_settings.hosts)
    return client


def create_repository(
    settings: Settings,
    entity_type: type[T],
    *,
    indices: Iterable[str] | None = None,
    client: AsyncOpenSearch | None = None,
) -> SearchRepository[T]:
    """Wire a ``SearchRepository`` for *entity_type* from *settings*.

    Args:
        settings: Root settings.
        entity_type: Type every hit is deserialized into.
        indices: Overrides ``settings.opensearch.indices``.
        client: Existing client to share; a new one is created (and owned by
            the repository) when omitted.

    Raises:
        ConfigurationError: If no index names are configured.
    """
    target_indices = list(indices) if indices is not None else list(settings.opensearch.indices)
    if not target_indices:
        raise ConfigurationError("No indices configured. Set SEARCHREPO_OPENSEARCH__INDICES or pass indices.")

    repo_settings = settings.repository
    owns_client = client is None
    return SearchRepository.for_entity(
        client if client is not None else create_client(settings),
        entity_type,
        target_indices,
        default_sort=Order(field=repo_settings.default_sort_field, direction=repo_settings.default_sort_direction),
        default_page_size=repo_settings.default_page_size,
        raise_on_error=repo_settings.raise_on_error,
        owns_client=owns_client,
    )
