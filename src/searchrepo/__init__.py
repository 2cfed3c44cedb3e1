"""SearchRepo — Typed repositories over OpenSearch indices."""

from searchrepo.models.page import Direction, Order, Page, PageRequest, Sort
from searchrepo.repository.base import SearchRepository
from searchrepo.serialization import EntityDeserializer

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "EntityDeserializer",
    "Order",
    "Page",
    "PageRequest",
    "SearchRepository",
    "Sort",
    "__version__",
]
