"""Test configuration and fixtures."""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

import pytest

from friend_links.config import GenerationConfig, GroupConfig
from friend_links.github_client.models import GitHubIssue, GitHubLabel


def make_body(payload: str, before: str = "", after: str = "") -> str:
    """Wrap JSON text in a correctly formed data block."""
    return (
        f"{before}<!-- DATA_START -->\n```json\n{payload}\n```\n"
        f"<!-- DATA_END -->{after}"
    )


@pytest.fixture
def data_body() -> Callable[..., str]:
    """Factory for bodies embedding a correctly formed data block."""
    return make_body


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Factory for issues with a valid data block by default."""

    def _make_issue(
        issue_id: int = 1,
        labels: list[str] | None = None,
        body: str | None = None,
        created_at: datetime = datetime(2024, 1, 1, 12, 0, 0),
        updated_at: datetime = datetime(2024, 1, 2, 12, 0, 0),
    ) -> GitHubIssue:
        if body is None:
            body = make_body(f'{{"name": "Blog {issue_id}"}}')
        return GitHubIssue(
            id=issue_id,
            url=f"https://api.github.com/repos/octocat/links/issues/{issue_id}",
            number=issue_id,
            state="open",
            title=f"Friend link {issue_id}",
            body=body,
            labels=[
                GitHubLabel(id=index, name=name, description=None)
                for index, name in enumerate(labels or [])
            ],
            created_at=created_at,
            updated_at=updated_at,
        )

    return _make_issue


@pytest.fixture
def groups() -> list[GroupConfig]:
    """Two configured groups."""
    return [
        GroupConfig(name="Category A", description="First group", label="cat-a"),
        GroupConfig(name="Category B", description="Second group", label="cat-b"),
    ]


@pytest.fixture
def generation() -> GenerationConfig:
    """Generation settings selecting approved issues."""
    return GenerationConfig(label="approved", sort_by_updated_time=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a complete configuration file."""
    path = tmp_path / "config.toml"
    path.write_text(
        f"""
[github]
token = "config_token"
owner = "octocat"
repository = "links"

[generation]
label = "approved"
sort_by_updated_time = false

[output]
json_path = "{(tmp_path / "out" / "links.json").as_posix()}"
js_path = "{(tmp_path / "out" / "links.js").as_posix()}"

[[groups]]
name = "Category A"
description = "First group"
label = "cat-a"

[[groups]]
name = "Category B"
description = "Second group"
label = "cat-b"
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by the CLI so they do not outlive a test."""
    yield
    logger = logging.getLogger("friend_links")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
