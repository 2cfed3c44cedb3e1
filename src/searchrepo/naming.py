"""Field name translation between caller and index naming conventions."""

from __future__ import annotations


def camel_to_snake(name: str) -> str:
    """Convert a camelCase field name to the index's underscore convention.

    Every uppercase letter becomes ``_`` followed by its lowercase form:
    ``createdAt`` -> ``created_at``, ``userIdValue`` -> ``user_id_value``.
    Names without uppercase letters are returned unchanged.
    """
    return "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in name)
