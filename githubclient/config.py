"""Configuration loading for githubclient.

Config sources (in priority order):
1. Explicit arguments passed to Config
2. Environment variables (GITHUBCLIENT_TOKEN, etc.)
3. .env file in current directory
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 100  # GitHub's maximum page size


def _parse_per_page(value: str) -> int:
    # 0 is out of range, so validate() reports a non-numeric value
    try:
        return int(value)
    except ValueError:
        return 0


@dataclass
class Config:
    github_token: str = ""
    api_url: str = DEFAULT_API_URL  # GitHub Enterprise: "https://host/api/v3"
    per_page: int = DEFAULT_PER_PAGE
    organisation: str = ""  # default org for the CLI

    @classmethod
    def load(cls) -> Config:
        return cls(
            github_token=os.getenv("GITHUBCLIENT_TOKEN", ""),
            api_url=os.getenv("GITHUBCLIENT_API_URL", DEFAULT_API_URL),
            per_page=_parse_per_page(os.getenv("GITHUBCLIENT_PER_PAGE", str(DEFAULT_PER_PAGE))),
            organisation=os.getenv("GITHUBCLIENT_ORG", ""),
        )

    def validate(self) -> list[str]:
        """Return a list of missing config issues."""
        issues = []
        if not self.github_token:
            issues.append("GitHub token not set (GITHUBCLIENT_TOKEN)")
        if not self.api_url:
            issues.append("API URL not set (GITHUBCLIENT_API_URL)")
        if not 1 <= self.per_page <= 100:
            issues.append("Page size must be a whole number between 1 and 100 (GITHUBCLIENT_PER_PAGE)")
        return issues
