"""Core data models for githubclient."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GhOrganisation:
    login: str
    id: int = 0


@dataclass(frozen=True)
class GhTeam:
    name: str
    id: int  # unique within an organisation


@dataclass(frozen=True)
class GhRepository:
    name: str
    description: str  # "" when GitHub returns null
    id: int
    html_url: str
    fork: bool
    created_date: int  # epoch day
    last_active_date: int  # epoch millis of the last push
    is_private: bool
    language: str  # "" when GitHub returns null
    archived: bool


@dataclass(frozen=True)
class GhRepoRelease:
    id: int
    tag_name: str
    created_at: datetime


@dataclass(frozen=True)
class GhRepoTag:
    name: str
