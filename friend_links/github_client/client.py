"""GitHub API client using PyGitHub."""

import logging
import os

from github import Github
from github.GithubException import GithubException, UnknownObjectException
from github.Issue import Issue
from github.Label import Label
from github.Repository import Repository

from ..exceptions import GitHubFetchError
from .models import GitHubIssue, GitHubLabel

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API client for reading friend link submissions."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)

    def _check_rate_limit(self) -> None:
        """Log the remaining rate limit budget."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining
            logger.info("GitHub API rate limit: %s requests remaining", remaining)
        except Exception as e:
            # Advisory only, the fetch itself reports real failures
            logger.warning("Could not check rate limit: %s", e)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            id=github_label.id,
            name=github_label.name,
            description=github_label.description,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        return GitHubIssue(
            id=github_issue.id,
            url=github_issue.url,
            number=github_issue.number,
            state=github_issue.state,
            title=github_issue.title,
            body=github_issue.body,
            labels=[self._convert_label(label) for label in github_issue.labels],
            closed_at=github_issue.closed_at,
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{owner}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {owner}/{repo} not found")
        except GithubException as e:
            raise GitHubFetchError(
                f"Failed to fetch repository {owner}/{repo}: {e.status}"
            ) from e

    def list_repository_issues(
        self, owner: str, repo: str, state: str = "open"
    ) -> list[GitHubIssue]:
        """Fetch the first page of issues of a repository.

        Only a single page is requested; the generator never paginates.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            state: Issue state (open, closed, all)

        Returns:
            List of GitHubIssue objects in the order returned by the API

        Raises:
            ValueError: If the repository does not exist
            GitHubFetchError: If the API request fails or returns bad data
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        logger.info("Fetching %s issues from %s/%s", state, owner, repo)

        try:
            page = repository.get_issues(state=state).get_page(0)
            issues = [self._convert_issue(github_issue) for github_issue in page]
        except GithubException as e:
            raise GitHubFetchError(
                f"Failed to fetch issues from {owner}/{repo}: {e.status}"
            ) from e
        except (ValueError, TypeError) as e:
            raise GitHubFetchError(
                f"Malformed issue data from {owner}/{repo}: {e}"
            ) from e

        logger.info("Fetched %d issues from %s/%s", len(issues), owner, repo)
        return issues
