"""Drain paginated GitHub list endpoints."""

from __future__ import annotations

from typing import TypeVar

from github.PaginatedList import PaginatedList

T = TypeVar("T")


def fetch_all(pages: PaginatedList[T]) -> list[T]:
    """Fetch every page of ``pages`` in order and return the items as one list.

    Pages are requested one after another until GitHub returns an empty one.
    Any failure propagates and nothing is returned.
    """
    items: list[T] = []
    page = 0
    while True:
        batch = pages.get_page(page)
        if not batch:
            return items
        items.extend(batch)
        page += 1
