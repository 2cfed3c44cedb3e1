"""Repository layer — Typed repositories over OpenSearch indices."""

from searchrepo.repository.base import SearchRepository
from searchrepo.repository.exceptions import (
    ConfigurationError,
    DeserializationError,
    RepositoryError,
    SearchTransportError,
)

__all__ = [
    "ConfigurationError",
    "DeserializationError",
    "RepositoryError",
    "SearchRepository",
    "SearchTransportError",
]
