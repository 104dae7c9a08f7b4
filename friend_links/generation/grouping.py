"""Grouping link entries by label and assembling the output structure.

An active entry is added to every group whose label it carries, so one
entry can be listed under several groups, and an active entry carrying no
group label is not listed at all.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import GenerationConfig, GroupConfig
from ..github_client.models import GitHubIssue
from .entries import LinkEntry, collect_link_entries

logger = logging.getLogger(__name__)


class GroupedOutput(BaseModel):
    """One group of the generated data file.

    Serialise with ``model_dump(by_alias=True)`` to get the published keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    group: str = Field(..., description="Label of the group")
    group_name: str = Field(..., alias="groupName", description="Name of the group")
    group_desc: str = Field(
        ..., alias="groupDesc", description="Description of the group"
    )
    entries: list[Any] = Field(
        default_factory=list, description="JSON payloads of the member entries"
    )


def filter_active_entries(
    entries: list[LinkEntry], selector_label: str
) -> list[LinkEntry]:
    """Keep only the entries carrying the selector label."""
    return [entry for entry in entries if entry.has_label(selector_label)]


def group_entries(
    entries: list[LinkEntry], selector_label: str, groups: list[GroupConfig]
) -> dict[str, list[LinkEntry]]:
    """Bucket active entries by group label.

    Args:
        entries: All entries, in fetch order
        selector_label: Label an entry needs to be considered at all
        groups: Configured groups, in output order

    Returns:
        Mapping of group label to member entries, with one key per group in
        configuration order
    """
    active = filter_active_entries(entries, selector_label)
    logger.info(
        "%d of %d entries carry the label '%s'",
        len(active),
        len(entries),
        selector_label,
    )

    buckets: dict[str, list[LinkEntry]] = {group.label: [] for group in groups}
    for entry in active:
        for group in groups:
            if entry.has_label(group.label):
                buckets[group.label].append(entry)

    return buckets


def sort_entries(
    entries: list[LinkEntry], sort_by_updated_time: bool
) -> list[LinkEntry]:
    """Stable ascending sort by updated time or creation time."""
    if sort_by_updated_time:
        return sorted(entries, key=lambda entry: entry.updated_at)
    return sorted(entries, key=lambda entry: entry.created_at)


def assemble_groups(
    groups: list[GroupConfig],
    buckets: dict[str, list[LinkEntry]],
    sort_by_updated_time: bool | None = None,
) -> list[GroupedOutput]:
    """Build the output records, one per configured group.

    Groups without entries are kept with an empty ``entries`` list.

    Args:
        groups: Configured groups, in output order
        buckets: Mapping returned by ``group_entries``
        sort_by_updated_time: Sort key preference; None keeps bucket order
    """
    result = []
    for group in groups:
        members = buckets.get(group.label, [])
        if sort_by_updated_time is not None:
            members = sort_entries(members, sort_by_updated_time)

        result.append(
            GroupedOutput(
                group=group.label,
                group_name=group.name,
                group_desc=group.description,
                entries=[entry.json_data for entry in members],
            )
        )
    return result


def generate_friend_links(
    issues: list[GitHubIssue],
    generation: GenerationConfig,
    groups: list[GroupConfig],
) -> list[GroupedOutput]:
    """Run validation, grouping and assembly over fetched issues."""
    entries = collect_link_entries(issues)
    buckets = group_entries(entries, generation.label, groups)
    return assemble_groups(groups, buckets, generation.sort_by_updated_time)
