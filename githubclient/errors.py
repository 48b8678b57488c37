"""Classification of GitHub API failures.

GitHub answers an exhausted primary rate limit with a 403 whose body says
"API rate limit exceeded for ...". PyGithub raises that as a
``GithubException`` (or its ``RateLimitExceededException`` subclass) whose
string form embeds the body, so matching on the message works for both.
"""

from __future__ import annotations

from github import RateLimitExceededException

RATE_LIMIT_MESSAGE = "API rate limit exceeded"


class RateLimitExceeded(Exception):
    """Raised when a GitHub call failed because the API rate limit is exhausted.

    The original exception is kept on ``cause`` for diagnostics.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"GitHub API rate limit exceeded: {cause}")
        self.cause = cause


def is_rate_limited(error: BaseException, message: str | None = None) -> bool:
    if isinstance(error, RateLimitExceededException):
        return True
    if message is None:
        message = str(error)
    return RATE_LIMIT_MESSAGE in message


def classify(error: BaseException, message: str | None = None) -> BaseException:
    """Return the exception the caller should see for an upstream failure.

    Rate-limit failures come back wrapped in ``RateLimitExceeded``; anything
    else is returned as-is so it can be re-raised unchanged.
    """
    if is_rate_limited(error, message):
        return RateLimitExceeded(error)
    return error
