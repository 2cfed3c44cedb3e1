"""Data models — Pagination primitives and query DSL helpers."""

from searchrepo.models.page import Direction, Order, Page, PageRequest, Sort

__all__ = ["Direction", "Order", "Page", "PageRequest", "Sort"]
