"""Tests for githubclient.github.paging."""

from __future__ import annotations

import pytest

from githubclient.github.paging import fetch_all


class TestFetchAll:
    def test_concatenates_pages_in_order(self, fake_pages):
        pages = fake_pages(["a", "b", "c", "d", "e"], per_page=2)
        assert fetch_all(pages) == ["a", "b", "c", "d", "e"]
        assert pages.requested == [0, 1, 2, 3]

    def test_full_last_page(self, fake_pages):
        pages = fake_pages(["a", "b", "c", "d"], per_page=2)
        assert fetch_all(pages) == ["a", "b", "c", "d"]
        assert pages.requested == [0, 1, 2]

    def test_empty(self, fake_pages):
        pages = fake_pages([])
        assert fetch_all(pages) == []
        assert pages.requested == [0]

    def test_many_pages(self, fake_pages):
        items = list(range(1000))
        assert fetch_all(fake_pages(items, per_page=3)) == items

    def test_page_failure_aborts(self, fake_pages):
        class FailingPages(fake_pages):
            def get_page(self, page):
                if page == 1:
                    raise RuntimeError("API rate limit exceeded for mr-robot")
                return super().get_page(page)

        with pytest.raises(RuntimeError, match="rate limit"):
            fetch_all(FailingPages(["a", "b", "c"], per_page=2))
