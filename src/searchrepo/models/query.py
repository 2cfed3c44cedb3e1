"""Query DSL helpers — Small builders for engine-native query dicts.

Queries are plain OpenSearch/Elasticsearch DSL dictionaries and are passed
through to the client untouched.  These helpers only save callers from
spelling out the nesting by hand.
"""

from __future__ import annotations

from typing import Any

Query = dict[str, Any]


def match_all() -> Query:
    return {"match_all": {}}


def match_phrase(field: str, value: Any) -> Query:
    """Exact ordered-token match of *value* within *field*."""
    return {"match_phrase": {field: value}}


def term(field: str, value: Any) -> Query:
    return {"term": {field: value}}


def range_query(
    field: str,
    *,
    gt: Any = None,
    gte: Any = None,
    lt: Any = None,
    lte: Any = None,
) -> Query:
    """Build a ``range`` query; bounds left as ``None`` are omitted.

    Raises:
        ValueError: If no bound is given.
    """
    bounds = {name: value for name, value in (("gt", gt), ("gte", gte), ("lt", lt), ("lte", lte)) if value is not None}
    if not bounds:
        raise ValueError(f"range query on '{field}' needs at least one bound")
    return {"range": {field: bounds}}


def bool_query(
    *,
    must: list[Query] | None = None,
    filter: list[Query] | None = None,
    should: list[Query] | None = None,
    must_not: list[Query] | None = None,
    minimum_should_match: int | str | None = None,
) -> Query:
    """Combine clauses into a ``bool`` query; empty clause lists are omitted."""
    clauses: dict[str, Any] = {}
    for name, value in (("must", must), ("filter", filter), ("should", should), ("must_not", must_not)):
        if value:
            clauses[name] = list(value)
    if minimum_should_match is not None:
        clauses["minimum_should_match"] = minimum_should_match
    return {"bool": clauses}
