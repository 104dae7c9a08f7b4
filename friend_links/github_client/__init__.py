"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubIssue, GitHubLabel

__all__ = [
    "GitHubClient",
    "GitHubIssue",
    "GitHubLabel",
]
