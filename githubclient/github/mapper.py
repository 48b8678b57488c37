"""Convert PyGithub objects into githubclient records."""

from __future__ import annotations

from datetime import date, datetime, timezone

from github.GitRelease import GitRelease
from github.Organization import Organization
from github.Repository import Repository
from github.Tag import Tag
from github.Team import Team

from githubclient.models import GhOrganisation, GhRepoRelease, GhRepository, GhRepoTag, GhTeam

EPOCH_DATE = date(1970, 1, 1)


def to_epoch_day(value: datetime | None) -> int:
    """Days since 1970-01-01 of the date part of ``value``, 0 when missing."""
    if value is None:
        return 0
    return (value.date() - EPOCH_DATE).days


def to_epoch_millis(value: datetime | None) -> int:
    """Milliseconds since the epoch, reading a naive ``value`` as UTC."""
    if value is None:
        return 0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def to_organisation(org: Organization) -> GhOrganisation:
    return GhOrganisation(login=org.login, id=org.id or 0)


def to_team(team: Team) -> GhTeam:
    return GhTeam(name=team.name, id=team.id)


def to_repository(repo: Repository) -> GhRepository:
    return GhRepository(
        name=repo.name,
        description=repo.description or "",
        id=repo.id,
        html_url=repo.html_url,
        fork=bool(repo.fork),
        created_date=to_epoch_day(repo.created_at),
        last_active_date=to_epoch_millis(repo.pushed_at),
        is_private=bool(repo.private),
        language=repo.language or "",
        archived=bool(repo.archived),
    )


def to_release(release: GitRelease) -> GhRepoRelease:
    return GhRepoRelease(id=release.id, tag_name=release.tag_name, created_at=release.created_at)


def to_tag(tag: Tag) -> GhRepoTag:
    return GhRepoTag(name=tag.name)
