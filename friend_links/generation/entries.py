"""Turning validated issues into link entries."""

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import EntryConsistencyError, InvalidIssueBodyError
from ..github_client.models import GitHubIssue
from .validator import extract_json_block, parse_json

logger = logging.getLogger(__name__)


class LinkEntry(BaseModel):
    """A friend link entry taken from one GitHub issue."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Same as the ID of the GitHub issue")
    labels: list[str] = Field(
        default_factory=list, description="Names of the labels on the issue"
    )
    json_data: Any = Field(..., description="JSON payload embedded in the issue body")
    created_at: datetime = Field(..., description="When the issue was created")
    updated_at: datetime = Field(..., description="When the issue was last updated")

    def has_label(self, label: str) -> bool:
        return label in self.labels


def build_link_entry(issue: GitHubIssue, json_text: str) -> LinkEntry:
    """Build an entry from an issue and its already validated JSON text.

    Raises:
        EntryConsistencyError: If the JSON text does not parse, which means
            it was not produced by the validator
    """
    try:
        json_data = parse_json(json_text)
    except ValueError as e:
        raise EntryConsistencyError(
            f"Validated data of issue {issue.id} failed to parse: {e}"
        ) from e

    return LinkEntry(
        id=issue.id,
        labels=issue.label_names,
        json_data=json_data,
        created_at=issue.created_at,
        updated_at=issue.updated_at,
    )


def collect_link_entries(issues: list[GitHubIssue]) -> list[LinkEntry]:
    """Validate every issue and build entries for the valid ones.

    Invalid issues are skipped with a log line; input order is preserved.
    """
    entries = []
    for issue in issues:
        logger.debug("Checking issue, ID: %s", issue.id)
        try:
            json_text = extract_json_block(issue.body)
        except InvalidIssueBodyError as e:
            logger.info("Skipping issue %s (#%s): %s", issue.id, issue.number, e.reason)
            continue
        entries.append(build_link_entry(issue, json_text))

    logger.info("Built %d entries from %d issues", len(entries), len(issues))
    return entries
