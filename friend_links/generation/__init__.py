"""Validation, grouping and rendering of friend link data."""

from .entries import LinkEntry, build_link_entry, collect_link_entries
from .grouping import (
    GroupedOutput,
    assemble_groups,
    filter_active_entries,
    generate_friend_links,
    group_entries,
)
from .js_format import is_valid_js_identifier, json_to_js_object, to_js_literal
from .validator import extract_json_block, is_valid_body

__all__ = [
    "GroupedOutput",
    "LinkEntry",
    "assemble_groups",
    "build_link_entry",
    "collect_link_entries",
    "extract_json_block",
    "filter_active_entries",
    "generate_friend_links",
    "group_entries",
    "is_valid_body",
    "is_valid_js_identifier",
    "json_to_js_object",
    "to_js_literal",
]
