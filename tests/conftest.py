"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel

from searchrepo.config.settings import Settings


class Event(BaseModel):
    """Entity used throughout the repository tests."""

    id: str
    title: str
    date_time: str
    created_at: str | None = None


def _make_hit(doc_id: str, source: dict[str, Any], index: str = "events-v1") -> dict[str, Any]:
    return {"_index": index, "_id": doc_id, "_score": 1.0, "_source": source}


def _make_event_source(n: int) -> dict[str, Any]:
    return {
        "id": f"evt-{n:03d}",
        "title": f"Quarterly review {n}",
        "date_time": f"2024-06-{n:02d}T09:00:00Z",
    }


def _search_response(hits: list[dict[str, Any]], total: int | None = None) -> dict[str, Any]:
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": len(hits) if total is None else total, "relation": "eq"},
            "hits": hits,
        },
    }


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        opensearch={"hosts": ["http://localhost:9200"], "indices": ["events-v1"]},
    )


@pytest.fixture
def event_type() -> type[Event]:
    """Entity type the repository tests deserialize into."""
    return Event


@pytest.fixture
def make_hit() -> Callable[..., dict[str, Any]]:
    """Build a raw search hit around a ``_source`` document."""
    return _make_hit


@pytest.fixture
def make_event_source() -> Callable[[int], dict[str, Any]]:
    """Build the n-th well-formed event source document."""
    return _make_event_source


@pytest.fixture
def search_response() -> Callable[..., dict[str, Any]]:
    """Build a search response body wrapping the given hits."""
    return _search_response


@pytest.fixture
def mock_client() -> AsyncMock:
    """AsyncOpenSearch stand-in with empty count and search responses."""
    client = AsyncMock()
    client.count.return_value = {"count": 0}
    client.search.return_value = _search_response([])
    return client


@pytest.fixture
def event_hits() -> list[dict[str, Any]]:
    """Five well-formed event hits."""
    return [_make_hit(f"evt-{n:03d}", _make_event_source(n)) for n in range(1, 6)]
