"""Manual verification: exercise the read-only client calls against a real organisation.

Usage:
    GITHUBCLIENT_TOKEN=ghp_... uv run python scripts/check_github_access.py my-org

Falls back to GITHUBCLIENT_ORG if no argument is given.
"""

from __future__ import annotations

import asyncio
import sys

from githubclient.api import GithubApiClient
from githubclient.config import Config
from githubclient.errors import RateLimitExceeded


async def run(config: Config, org: str) -> None:
    async with GithubApiClient.from_config(config) as api:
        print("--- Organisations ---")
        for o in await api.get_organisations():
            print(f"  {o.login} ({o.id})")

        print(f"\n--- Teams in {org} ---")
        teams = await api.get_teams_for_organisation(org)
        for team in teams[:10]:
            print(f"  {team.name} ({team.id})")

        print(f"\n--- Repositories in {org} ---")
        repos = await api.get_repos_for_org(org)
        for repo in repos[:10]:
            print(f"  {repo.name}: {repo.description[:60] or '(no description)'}")
            print(f"    Language: {repo.language or '-'}  Archived: {repo.archived}")

        if repos:
            first = repos[0].name
            tags = await api.get_tags(org, first)
            has_readme = await api.repo_contains_content("README.md", first, org)
            print(f"\n{first}: {len(tags)} tags, README.md present: {has_readme}")

        print(f"\nSummary: {len(teams)} teams, {len(repos)} repositories")


def main() -> None:
    config = Config.load()

    # Allow org override from CLI arg
    org = sys.argv[1] if len(sys.argv) > 1 else config.organisation

    if not config.github_token:
        print("ERROR: Set GITHUBCLIENT_TOKEN environment variable")
        sys.exit(1)

    if not org:
        print("ERROR: Provide organisation as argument or set GITHUBCLIENT_ORG")
        sys.exit(1)

    print(f"Connecting to {config.api_url}...")
    try:
        asyncio.run(run(config, org))
    except RateLimitExceeded as e:
        print(f"ERROR: {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
