"""Repository-specific exceptions."""


class RepositoryError(Exception):
    """Base exception for repository errors."""


class ConfigurationError(RepositoryError):
    """Raised when a repository or client is configured incorrectly."""


class SearchTransportError(RepositoryError):
    """Raised when a count or search request fails at the transport level.

    Only raised by repositories built with ``raise_on_error=True``; otherwise
    transport failures degrade to empty results.
    """


class DeserializationError(RepositoryError):
    """Raised when a hit's source document cannot be mapped to the entity type."""
