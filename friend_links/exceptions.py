"""Custom exceptions for the friend link generator."""


class FriendLinksError(Exception):
    """Base exception for friend link generation errors."""


class ConfigError(FriendLinksError):
    """Configuration file is missing, unreadable or invalid."""


class GitHubFetchError(FriendLinksError):
    """Issues could not be fetched from the GitHub API."""


class InvalidIssueBodyError(FriendLinksError, ValueError):
    """Issue body does not embed a single well-formed data block."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class EntryConsistencyError(FriendLinksError):
    """Validated issue data could not be turned into an entry."""
