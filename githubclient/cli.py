"""CLI entry point for githubclient."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich import print as rprint
from rich.table import Table

from githubclient.api import GithubApiClient
from githubclient.config import Config
from githubclient.errors import RateLimitExceeded

T = TypeVar("T")

app = typer.Typer(help="Inspect GitHub organisations, teams and repositories.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API activity"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def _load_config() -> Config:
    config = Config.load()
    issues = config.validate()
    if issues:
        for issue in issues:
            rprint(f"[red]Config error: {issue}[/red]")
        raise typer.Exit(1)
    return config


def _resolve_org(org: str | None, config: Config) -> str:
    org = org or config.organisation
    if not org:
        rprint("[red]No organisation given and GITHUBCLIENT_ORG not set[/red]")
        raise typer.Exit(1)
    return org


def _run(config: Config, action: Callable[[GithubApiClient], Awaitable[T]]) -> T:
    """Run one facade call to completion, turning rate limiting into exit code 2."""

    async def go() -> T:
        async with GithubApiClient.from_config(config) as api:
            return await action(api)

    try:
        return asyncio.run(go())
    except RateLimitExceeded as e:
        rprint(f"[yellow]{e}[/yellow]")
        rprint("Wait for the rate limit window to reset and try again.")
        raise typer.Exit(2)


def _format_millis(millis: int) -> str:
    if not millis:
        return "-"
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


@app.command()
def orgs() -> None:
    """List organisations the token's user belongs to."""
    config = _load_config()
    organisations = _run(config, lambda api: api.get_organisations())
    for org in organisations:
        rprint(f"  {org.login} ({org.id})")
    rprint(f"[bold]{len(organisations)}[/bold] organisation(s)")


@app.command()
def teams(
    org: Optional[str] = typer.Argument(None, help="Organisation (defaults to GITHUBCLIENT_ORG)"),
) -> None:
    """List teams in an organisation."""
    config = _load_config()
    org = _resolve_org(org, config)
    found = _run(config, lambda api: api.get_teams_for_organisation(org))
    for team in found:
        rprint(f"  {team.name} ({team.id})")
    rprint(f"[bold]{len(found)}[/bold] team(s) in {org}")


@app.command()
def repos(
    org: Optional[str] = typer.Argument(None, help="Organisation (defaults to GITHUBCLIENT_ORG)"),
    team: Optional[str] = typer.Option(None, "--team", "-t", help="Only repositories of this team"),
) -> None:
    """List repositories of an organisation or one of its teams."""
    config = _load_config()
    org = _resolve_org(org, config)

    async def fetch(api: GithubApiClient):
        if team is None:
            return await api.get_repos_for_org(org)
        team_id = await api.team_id(org, team)
        if team_id is None:
            return None
        return await api.get_repos_for_team(team_id)

    found = _run(config, fetch)
    if found is None:
        rprint(f"[red]No team named {team} in {org}[/red]")
        raise typer.Exit(1)

    table = Table("Name", "Language", "Last push", "Flags")
    for repo in found:
        flags = [
            name
            for name, on in (("private", repo.is_private), ("fork", repo.fork), ("archived", repo.archived))
            if on
        ]
        table.add_row(repo.name, repo.language or "-", _format_millis(repo.last_active_date), ", ".join(flags))
    rprint(table)
    rprint(f"[bold]{len(found)}[/bold] repositories")


@app.command()
def tags(
    org: str = typer.Argument(help="Organisation"),
    repo: str = typer.Argument(help="Repository name"),
) -> None:
    """List tags of a repository."""
    config = _load_config()
    for name in _run(config, lambda api: api.get_tags(org, repo)):
        rprint(f"  {name}")


@app.command()
def releases(
    org: str = typer.Argument(help="Organisation"),
    repo: str = typer.Argument(help="Repository name"),
) -> None:
    """List releases of a repository."""
    config = _load_config()
    for release in _run(config, lambda api: api.get_releases(org, repo)):
        rprint(f"  {release.tag_name}  {release.created_at:%Y-%m-%d}")


@app.command()
def cat(
    org: str = typer.Argument(help="Organisation"),
    repo: str = typer.Argument(help="Repository name"),
    path: str = typer.Argument(help="File path inside the repository"),
) -> None:
    """Print a file from a repository."""
    config = _load_config()
    content = _run(config, lambda api: api.get_file_content(path, repo, org))
    if content is None:
        rprint(f"[red]No file at {path} in {org}/{repo}[/red]")
        raise typer.Exit(1)
    typer.echo(content, nl=False)


if __name__ == "__main__":
    app()
