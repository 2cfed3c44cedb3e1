"""Integration test fixtures — Docker-based OpenSearch with seed data.

Expects OpenSearch (security plugin disabled) on localhost:9201, e.g.::

    docker run -d -p 9201:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2

Seed data is loaded on first use; tests are skipped when the service is down.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx
import pytest

OPENSEARCH_HOST = "http://localhost:9201"
INDEX = "test-events"

SEED_DOCUMENTS: list[dict[str, Any]] = [
    {
        "id": f"evt-{n:03d}",
        "title": "Quarterly planning review" if n % 5 == 0 else f"Team sync {n}",
        "status": "open" if n <= 25 else "closed",
        "date_time": f"2024-03-{n:02d}T09:00:00Z",
        "created_at": f"2024-02-{n:02d}T12:00:00Z",
    }
    for n in range(1, 29)
] + [
    # Missing required fields: mapped entities must skip it.
    {"id": "evt-broken", "status": "broken", "date_time": "2024-04-01T09:00:00Z"},
]


def _wait_for_service(url: str, timeout: float = 120.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=30)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


async def _seed_opensearch(host: str = OPENSEARCH_HOST, index: str = INDEX) -> None:
    async with httpx.AsyncClient(base_url=host, timeout=30) as client:
        await client.delete(f"/{index}", params={"ignore_unavailable": "true"})

        mapping = {
            "mappings": {
                "properties": {
                    "id": {"type": "keyword"},
                    "title": {"type": "text"},
                    "status": {"type": "keyword"},
                    "date_time": {"type": "date"},
                    "created_at": {"type": "date"},
                }
            }
        }
        resp = await client.put(f"/{index}", json=mapping)
        resp.raise_for_status()

        for doc in SEED_DOCUMENTS:
            resp = await client.put(f"/{index}/_doc/{doc['id']}", json=doc)
            resp.raise_for_status()

        await client.post(f"/{index}/_refresh")


@pytest.fixture(scope="session")
def opensearch_ready() -> str:
    """Ensure OpenSearch is running and seeded."""
    if not _wait_for_service(OPENSEARCH_HOST, timeout=30.0):
        pytest.skip(f"OpenSearch not available at {OPENSEARCH_HOST}")
    asyncio.run(_seed_opensearch())
    return OPENSEARCH_HOST


@pytest.fixture
def seeded_index() -> str:
    """Name of the seeded index."""
    return INDEX
