"""Asynchronous facade over the GitHub API.

Usage:
    async with GithubApiClient.from_config(Config.load()) as api:
        teams = await api.get_teams_for_organisation("my-org")

Each method runs its blocking PyGithub work in a worker thread and either
returns mapped records or raises. Failures caused by an exhausted rate limit
are raised as ``RateLimitExceeded``; every other failure is raised unchanged.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Callable, TypeVar

from githubclient.config import Config
from githubclient.errors import classify
from githubclient.github.client import GitHubClient
from githubclient.github.mapper import (
    to_organisation,
    to_release,
    to_repository,
    to_tag,
    to_team,
)
from githubclient.github.paging import fetch_all
from githubclient.models import GhOrganisation, GhRepoRelease, GhRepository, GhTeam

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise ValueError(f"{name} must not be empty")


def _decode_content(encoded: str) -> str:
    # GitHub wraps the base64 payload and ends it with a newline
    return base64.b64decode(encoded.rstrip("\r\n")).decode("utf-8", errors="replace")


class GithubApiClient:
    """One coroutine per supported GitHub action."""

    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: Config) -> GithubApiClient:
        return cls(
            GitHubClient(
                token=config.github_token,
                api_url=config.api_url,
                per_page=config.per_page,
            )
        )

    async def _call(self, operation: str, fn: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(fn)
        except Exception as e:
            error = classify(e)
            if error is e:
                raise
            logger.warning(f"GitHub API rate limit exceeded during {operation}")
            raise error from e

    async def get_organisations(self) -> list[GhOrganisation]:
        orgs = await self._call(
            "get_organisations",
            lambda: [to_organisation(o) for o in fetch_all(self._client.organisations())],
        )
        logger.debug(f"Fetched {len(orgs)} organisations")
        return orgs

    async def get_tags(self, org: str, repo_name: str) -> list[str]:
        _require(org=org, repo_name=repo_name)
        tags = await self._call(
            "get_tags",
            lambda: [to_tag(t) for t in fetch_all(self._client.tags(org, repo_name))],
        )
        logger.debug(f"Fetched {len(tags)} tags for {org}/{repo_name}")
        return [tag.name for tag in tags]

    async def get_releases(self, org: str, repo_name: str) -> list[GhRepoRelease]:
        _require(org=org, repo_name=repo_name)
        releases = await self._call(
            "get_releases",
            lambda: [to_release(r) for r in fetch_all(self._client.releases(org, repo_name))],
        )
        logger.debug(f"Fetched {len(releases)} releases for {org}/{repo_name}")
        return releases

    async def get_teams_for_organisation(self, org: str) -> list[GhTeam]:
        _require(org=org)
        teams = await self._call(
            "get_teams_for_organisation",
            lambda: [to_team(t) for t in fetch_all(self._client.teams(org))],
        )
        logger.debug(f"Fetched {len(teams)} teams for {org}")
        return teams

    async def get_repos_for_team(self, team_id: int) -> list[GhRepository]:
        repos = await self._call(
            "get_repos_for_team",
            lambda: [to_repository(r) for r in fetch_all(self._client.team_repos(team_id))],
        )
        logger.debug(f"Fetched {len(repos)} repositories for team {team_id}")
        return repos

    async def get_repos_for_org(self, org: str) -> list[GhRepository]:
        _require(org=org)
        repos = await self._call(
            "get_repos_for_org",
            lambda: [to_repository(r) for r in fetch_all(self._client.org_repos(org))],
        )
        logger.debug(f"Fetched {len(repos)} repositories for {org}")
        return repos

    async def repo_contains_content(self, path: str, repo_name: str, org: str) -> bool:
        """True when ``path`` itself exists; listing a directory's children does not count."""
        contents = await self._call(
            "repo_contains_content",
            lambda: self._client.contents(org, repo_name, path),
        )
        return any(c.path == path for c in contents)

    async def get_file_content(self, path: str, repo_name: str, org: str) -> str | None:
        """Decoded text of the file at ``path``, or None if there is no such file.

        A directory at ``path`` lists entries nested under it, none of which
        match ``path`` exactly, so it also yields None. Bytes that are not
        valid UTF-8 come back as U+FFFD replacement characters.
        """

        def fetch() -> str | None:
            for entry in self._client.contents(org, repo_name, path):
                if entry.path == path:
                    return _decode_content(entry.content or "")
            return None

        return await self._call("get_file_content", fetch)

    async def contains_repo(self, owner: str, repo_name: str) -> bool:
        repo = await self._call(
            "contains_repo",
            lambda: self._client.repository(owner, repo_name),
        )
        return repo is not None

    async def team_id(self, org: str, team_name: str) -> int | None:
        teams = await self.get_teams_for_organisation(org)
        return next((team.id for team in teams if team.name == team_name), None)

    async def create_repo(self, org: str, repo_name: str) -> str:
        """Create ``org/repo_name`` and return its clone URL."""
        repo = await self._call(
            "create_repo",
            lambda: self._client.create_repo(org, repo_name),
        )
        logger.info(f"Created repository {org}/{repo_name}")
        return repo.clone_url

    async def add_repo_to_team(self, org: str, repo_name: str, team_id: int) -> None:
        await self._call(
            "add_repo_to_team",
            lambda: self._client.add_repo_to_team(team_id, org, repo_name),
        )
        logger.info(f"Added {org}/{repo_name} to team {team_id}")

    async def create_file(
        self, org: str, repo_name: str, path: str, contents: str, message: str
    ) -> None:
        """Commit ``contents`` as a new file at ``path``."""
        if not message:
            raise ValueError("Commit message must not be empty")

        encoded = base64.b64encode(contents.encode("utf-8")).decode("ascii")
        await self._call(
            "create_file",
            lambda: self._client.create_file(org, repo_name, path, encoded, message),
        )
        logger.info(f"Committed {path} to {org}/{repo_name}")

    def close(self) -> None:
        self._client.close()

    async def __aenter__(self) -> GithubApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()
