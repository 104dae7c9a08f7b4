"""Pydantic models for GitHub data structures.

These models map to the fields of GitHub's REST API issue listing that the
generator relies on; everything else in the response is ignored.
API Reference: https://docs.github.com/en/rest/issues/issues#list-repository-issues
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(None, description="Unique label identifier (integer)")
    name: str = Field(..., description="Name of the label (string)")
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model representing a friend link submission.

    Maps to GitHub REST API Issue object.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique issue identifier (integer)")
    url: str = Field(..., description="API URL of the issue (string)")
    number: int = Field(..., description="Issue number within the repository (integer)")
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    closed_at: datetime | None = Field(
        None, description="Timestamp of issue closure, null while open (ISO 8601)"
    )
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )

    @property
    def label_names(self) -> list[str]:
        """Names of the attached labels, in API order."""
        return [label.name for label in self.labels]
