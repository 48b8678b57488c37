"""Thin wrapper around PyGithub for authenticated GitHub API access.

Every method is a blocking call that returns raw PyGithub objects. The few
endpoints PyGithub does not model (team repositories by id, adding a
repository to a team, committing a pre-encoded file) go through its
``Requester`` directly. A 404 on a lookup comes back as ``None`` or an empty
list rather than an exception.
"""

from __future__ import annotations

import urllib.parse

from github import Auth, Github, UnknownObjectException
from github.ContentFile import ContentFile
from github.GitRelease import GitRelease
from github.Organization import Organization
from github.PaginatedList import PaginatedList
from github.Repository import Repository
from github.Tag import Tag
from github.Team import Team

from githubclient.config import DEFAULT_API_URL, DEFAULT_PER_PAGE

IRONMAN_PREVIEW = "application/vnd.github.ironman-preview+json"


def repository_id(org: str, repo_name: str) -> str:
    """GitHub's ``owner/name`` identifier for a repository."""
    return f"{org}/{repo_name}"


class GitHubClient:
    """Authenticated GitHub client.

    Usage:
        client = GitHubClient(token="ghp_...")
        teams = client.teams("my-org")  # PaginatedList of PyGithub Team objects
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        # retry=None: a rate-limited 403 must reach the caller at once instead of
        # PyGithub sleeping until the limit resets
        self._gh = Github(auth=Auth.Token(token), base_url=api_url, per_page=per_page, retry=None)

    def organisations(self) -> PaginatedList[Organization]:
        return self._gh.get_user().get_orgs()

    def teams(self, org: str) -> PaginatedList[Team]:
        return self._gh.get_organization(org).get_teams()

    def team_repos(self, team_id: int) -> PaginatedList[Repository]:
        return PaginatedList(Repository, self._gh.requester, f"/teams/{team_id}/repos", None)

    def org_repos(self, org: str) -> PaginatedList[Repository]:
        return self._gh.get_organization(org).get_repos()

    def tags(self, org: str, repo_name: str) -> PaginatedList[Tag]:
        return self._repo(org, repo_name).get_tags()

    def releases(self, org: str, repo_name: str) -> PaginatedList[GitRelease]:
        return self._repo(org, repo_name).get_releases()

    def contents(self, org: str, repo_name: str, path: str) -> list[ContentFile]:
        """List the content entries at ``path``; empty when nothing is there.

        A file path yields one entry, a directory path yields its children.
        """
        try:
            contents = self._repo(org, repo_name).get_contents(path)
        except UnknownObjectException:
            return []

        if not isinstance(contents, list):
            contents = [contents]
        return contents

    def repository(self, owner: str, repo_name: str) -> Repository | None:
        try:
            return self._gh.get_repo(repository_id(owner, repo_name))
        except UnknownObjectException:
            return None

    def create_repo(self, org: str, repo_name: str) -> Repository:
        return self._gh.get_organization(org).create_repo(repo_name)

    def add_repo_to_team(self, team_id: int, org: str, repo_name: str) -> None:
        """Grant ``team_id`` push access to ``org/repo_name``."""
        self._gh.requester.requestJsonAndCheck(
            "PUT",
            f"/teams/{team_id}/repos/{repository_id(org, repo_name)}",
            headers={"Accept": IRONMAN_PREVIEW},
            input={"permission": "push"},
        )

    def create_file(
        self, org: str, repo_name: str, path: str, encoded_content: str, message: str
    ) -> None:
        """Commit a new file whose contents are already base64 encoded."""
        self._gh.requester.requestJsonAndCheck(
            "PUT",
            f"/repos/{repository_id(org, repo_name)}/contents/{urllib.parse.quote(path)}",
            input={"message": message, "content": encoded_content},
        )

    def _repo(self, org: str, repo_name: str) -> Repository:
        # lazy: no request until a sub-resource is fetched
        return self._gh.get_repo(repository_id(org, repo_name), lazy=True)

    def close(self) -> None:
        self._gh.close()
