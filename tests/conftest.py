"""Shared test fixtures for githubclient."""

from __future__ import annotations

import json
import threading
import time
from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from githubclient.api import GithubApiClient
from githubclient.github.client import GitHubClient


class FakePages:
    """Stands in for a PyGithub PaginatedList, serving ``items`` in fixed-size pages."""

    def __init__(self, items, per_page: int = 2) -> None:
        self._items = list(items)
        self.per_page = per_page
        self.requested: list[int] = []

    def get_page(self, page: int) -> list:
        self.requested.append(page)
        start = page * self.per_page
        return self._items[start : start + self.per_page]


def _make_repo(**kwargs) -> SimpleNamespace:
    defaults = dict(
        name="repoA",
        description="some desc",
        id=1,
        html_url="http://some/html/url",
        fork=True,
        created_at=datetime(2024, 6, 10, 9, 30, tzinfo=timezone.utc),
        pushed_at=datetime(2024, 6, 15, 10, 0, tzinfo=timezone.utc),
        private=True,
        language="Scala",
        archived=True,
        clone_url="git@github.com:hmrc/repoA.git",
    )
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def _make_content(path: str, content: str | None = None) -> SimpleNamespace:
    return SimpleNamespace(path=path, name=path.rsplit("/", 1)[-1], content=content)


@pytest.fixture
def fake_pages() -> type[FakePages]:
    return FakePages


@pytest.fixture
def make_repo():
    """Factory for raw repositories shaped like PyGithub's Repository."""
    return _make_repo


@pytest.fixture
def make_content():
    """Factory for raw content entries shaped like PyGithub's ContentFile."""
    return _make_content


@pytest.fixture
def transport() -> MagicMock:
    return MagicMock(spec=GitHubClient)


@pytest.fixture
def api(transport: MagicMock) -> GithubApiClient:
    return GithubApiClient(transport)


@pytest.fixture
def rate_limit_error() -> RuntimeError:
    return RuntimeError("API rate limit exceeded for mr-robot")


@pytest.fixture
def rate_limited_github():
    """Local HTTP server answering every request like GitHub does once the rate limit is spent.

    Yields the server; ``server.hits`` counts requests received and
    ``server.url`` is the API base URL to point a client at.
    """

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            self.server.hits += 1
            body = json.dumps({
                "message": "API rate limit exceeded for 10.0.0.1.",
                "documentation_url": "https://docs.github.com/rest/overview/resources-in-the-rest-api#rate-limiting",
            }).encode("utf-8")
            self.send_response(403)
            self.send_header("Content-Type", "application/json; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.send_header("X-RateLimit-Limit", "5000")
            self.send_header("X-RateLimit-Remaining", "0")
            self.send_header("X-RateLimit-Reset", str(int(time.time()) + 2))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    server.hits = 0
    server.url = f"http://127.0.0.1:{server.server_address[1]}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
