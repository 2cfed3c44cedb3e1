"""OpenSearch client wiring.

Quick start::

    from searchrepo.client import create_repository
    from searchrepo.config.settings import Settings

    repo = create_repository(Settings(), User, indices=["users-v1"])
    users = await repo.fetch_by_field("lastName", "Doe")
"""

from searchrepo.client.factory import client_kwargs, create_client, create_repository

__all__ = ["client_kwargs", "create_client", "create_repository"]
