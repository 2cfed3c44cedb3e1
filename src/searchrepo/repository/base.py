"""Search repository — Typed repository over an OpenSearch index set.

``SearchRepository`` turns domain-level lookups into count and search
requests against ``AsyncOpenSearch``, maps every hit's ``_source`` to the
entity type through an explicit deserializer, and wraps paged results in
``Page``.

Failure policy:
  - Transport errors during count or search are logged and degrade to an
    empty result (``[]``, ``0`` or a page with ``error`` set).  Pass
    ``raise_on_error=True`` to get ``SearchTransportError`` instead.
  - A hit that cannot be deserialized is logged and dropped; the rest of
    the batch is still returned.

Example::

    repo = SearchRepository.for_entity(client, User, ["users-v1"])
    users = await repo.fetch_by_field("email", "jane@example.com")
    page = await repo.fetch_page(
        bool_query(filter=[term("active", True)]),
        PageRequest(page=0, size=10, sort=Sort.by("createdAt", direction=Direction.DESC)),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from opensearchpy.exceptions import TransportError

from searchrepo.models.page import DEFAULT_PAGE_SIZE, Order, Page, PageRequest
from searchrepo.models.query import Query, match_phrase
from searchrepo.naming import camel_to_snake
from searchrepo.repository.exceptions import (
    ConfigurationError,
    DeserializationError,
    SearchTransportError,
)
from searchrepo.serialization import EntityDeserializer

if TYPE_CHECKING:
    from opensearchpy import AsyncOpenSearch

logger = logging.getLogger(__name__)

T = TypeVar("T")

Deserializer = Callable[[Any], T]

DEFAULT_SORT = Order.asc("dateTime")

_TRANSPORT_ERRORS = (TransportError, OSError)

# Errors a deserializer may raise for a single bad hit; the hit is dropped.
_MAPPING_ERRORS = (DeserializationError, ValueError, TypeError, LookupError, AttributeError)


class SearchRepository(Generic[T]):
    """Generic repository over a fixed set of indices.

    Args:
        client: An ``AsyncOpenSearch`` (or API-compatible) client.
        deserializer: Callable mapping a hit's source payload to ``T``,
            usually an ``EntityDeserializer``.  ``ValueError``, ``TypeError``,
            ``LookupError`` or ``AttributeError`` raised for one hit drops
            only that hit.
        indices: Index names every request is scoped to.
        default_sort: Sort key used when a page request carries none.
        default_page_size: Page size used when ``fetch_page`` gets no request.
        raise_on_error: Raise ``SearchTransportError`` on transport failures
            instead of degrading to an empty result.
        owns_client: Close the client in ``close()``.

    Raises:
        ConfigurationError: If *indices* is empty.
    """

    def __init__(
        self,
        client: AsyncOpenSearch,
        deserializer: Deserializer[T],
        indices: Iterable[str],
        *,
        default_sort: Order = DEFAULT_SORT,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        raise_on_error: bool = False,
        owns_client: bool = False,
    ) -> None:
        self._client = client
        self._deserializer = deserializer
        self._indices: tuple[str, ...] = tuple(indices)
        if not self._indices:
            raise ConfigurationError("SearchRepository needs at least one index name.")
        self._default_sort = default_sort
        self._default_page_size = default_page_size
        self._raise_on_error = raise_on_error
        self._owns_client = owns_client

    @classmethod
    def for_entity(
        cls,
        client: AsyncOpenSearch,
        entity_type: type[T],
        indices: Iterable[str],
        **kwargs: Any,
    ) -> SearchRepository[T]:
        """Build a repository that deserializes hits into *entity_type*."""
        return cls(client, EntityDeserializer(entity_type), indices, **kwargs)

    @property
    def indices(self) -> tuple[str, ...]:
        return self._indices

    @property
    def default_sort(self) -> Order:
        return self._default_sort

    async def close(self) -> None:
        """Close the underlying client if this repository owns it."""
        if self._owns_client:
            await self._client.close()

    # ── Public operations ────────────────────────────────────────────────

    async def fetch_by_field(self, name: str, value: Any) -> list[T]:
        """Return entities whose *name* field phrase-matches *value*.

        No pagination or sort is applied: the engine's default window and
        relevance ordering are used.
        """
        return await self.fetch_by_query(match_phrase(name, value))

    async def fetch_by_query(self, query: Query) -> list[T]:
        """Return entities matching *query* (unpaged)."""
        items, _ = await self._search(query)
        return items

    async def fetch_page(self, query: Query, page_request: PageRequest | None = None) -> Page[T]:
        """Return one page of entities matching *query*.

        Issues a count request first and skips the search entirely when
        nothing matches.  The total and the items are read in two separate
        round trips and are not a consistent snapshot.
        """
        page_request = page_request or PageRequest(size=self._default_page_size)

        total, error = await self._count(query)
        if total == 0:
            return Page.empty(page_request, error=error)

        items, error = await self._search(query, page_request)
        return Page(items=items, total=total, page_request=page_request, error=error)

    async def count(self, query: Query) -> int:
        """Return the number of documents matching *query*."""
        total, _ = await self._count(query)
        return total

    # ── Request execution ────────────────────────────────────────────────

    async def _count(self, query: Query) -> tuple[int, str | None]:
        body = self._count_body(query)
        logger.info("Search source: %s", body)
        logger.debug("Count request (indices: %s): %s", self._indices, body)

        try:
            response = await self._client.count(index=list(self._indices), body=body)
        except _TRANSPORT_ERRORS as e:
            return 0, self._transport_failure("counting", e)
        return int(response.get("count", 0)), None

    async def _search(self, query: Query, page_request: PageRequest | None = None) -> tuple[list[T], str | None]:
        body = self._search_body(query, page_request)
        logger.debug("Search request (indices: %s): %s", self._indices, body)

        try:
            response = await self._client.search(index=list(self._indices), body=body)
        except _TRANSPORT_ERRORS as e:
            return [], self._transport_failure("searching", e)
        return self._map_hits(response.get("hits", {}).get("hits", [])), None

    def _transport_failure(self, action: str, error: Exception) -> str:
        message = f"Error {action} in indices {list(self._indices)}: {error}"
        if self._raise_on_error:
            raise SearchTransportError(message) from error
        logger.error("%s", message)
        return message

    # ── Request building ─────────────────────────────────────────────────

    @staticmethod
    def _count_body(query: Query) -> dict[str, Any]:
        return {"query": query}

    def _search_body(self, query: Query, page_request: PageRequest | None) -> dict[str, Any]:
        body: dict[str, Any] = {"query": query}
        if page_request is not None:
            body["from"] = page_request.offset
            body["size"] = page_request.size
            body["sort"] = [self._sort_clause(page_request)]
        return body

    def _sort_clause(self, page_request: PageRequest) -> dict[str, Any]:
        """Translate the first sort key of *page_request* to a field sort."""
        order = page_request.sort.first() or self._default_sort
        return {camel_to_snake(order.field): {"order": order.direction.value}}

    # ── Response mapping ─────────────────────────────────────────────────

    def _map_hits(self, hits: Sequence[Mapping[str, Any]]) -> list[T]:
        results: list[T] = []
        for hit in hits:
            try:
                results.append(self._deserializer(hit.get("_source", {})))
            except _MAPPING_ERRORS as e:
                logger.error(
                    "Error mapping hit %s (indices: %s) to entity: %s",
                    hit.get("_id"),
                    list(self._indices),
                    e,
                )
        return results

    def __repr__(self) -> str:
        return f"{type(self).__name__}(indices={list(self._indices)!r}, deserializer={self._deserializer!r})"
