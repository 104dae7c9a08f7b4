"""Validation of the data block embedded in issue bodies.

An issue body may contain any Markdown, but the friend link data must be
embedded exactly like this::

    <!-- DATA_START -->
    ```json
    {"name": "My Blog", "url": "https://myblog.com"}
    ```
    <!-- DATA_END -->

Detection is a plain substring scan, not a Markdown parse, so marker-like
text inside the code block counts as an extra marker.
"""

import json
import logging

from ..exceptions import InvalidIssueBodyError

logger = logging.getLogger(__name__)

DATA_START = "<!-- DATA_START -->"
DATA_END = "<!-- DATA_END -->"
CODE_BLOCK_START = "```json"
CODE_BLOCK_END = "```"

# Deepest array/object nesting accepted in a data block (serde_json uses 128)
MAX_NESTING_DEPTH = 128


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def _check_nesting_depth(text: str, limit: int = MAX_NESTING_DEPTH) -> None:
    """Raise ValueError if arrays/objects nest deeper than the limit.

    Brackets inside string literals are ignored.
    """
    depth = 0
    in_string = False
    escaped = False
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "[{":
            depth += 1
            if depth > limit:
                raise ValueError(f"JSON nesting exceeds {limit} levels")
        elif char in "]}":
            depth -= 1


def parse_json(text: str) -> object:
    """Parse JSON text strictly.

    NaN and Infinity literals are rejected, as is nesting deeper than
    MAX_NESTING_DEPTH.
    """
    _check_nesting_depth(text)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError("JSON nesting too deep") from e


def extract_json_block(body: str | None) -> str:
    """Extract the JSON text embedded between the data markers.

    Args:
        body: Raw issue body (None is treated as an empty body)

    Returns:
        The text inside the ```json fence, guaranteed to parse as JSON

    Raises:
        InvalidIssueBodyError: If any rule of the embedding format is violated
    """
    body = body or ""

    data_start_index = body.find(DATA_START)
    data_end_index = body.find(DATA_END)

    if data_start_index == -1 or data_end_index == -1:
        raise InvalidIssueBodyError("Missing DATA_START or DATA_END comment.")

    if body.count(DATA_START) != 1 or body.count(DATA_END) != 1:
        raise InvalidIssueBodyError("Multiple DATA_START or DATA_END comments found.")

    if data_start_index > data_end_index:
        raise InvalidIssueBodyError("DATA_START comment is after DATA_END comment.")

    data_section = body[data_start_index + len(DATA_START) : data_end_index].strip()

    if not (
        data_section.startswith(CODE_BLOCK_START)
        and data_section.endswith(CODE_BLOCK_END)
    ):
        raise InvalidIssueBodyError(
            "Other Markdown content found in the data section."
        )

    # The opening fence also contains "```", so one block yields two matches
    if (
        data_section.count(CODE_BLOCK_START) != 1
        or data_section.count(CODE_BLOCK_END) != 2
    ):
        raise InvalidIssueBodyError(
            "Multiple code blocks (or other Markdown content) found in the "
            "data section."
        )

    code_block = data_section[len(CODE_BLOCK_START) : -len(CODE_BLOCK_END)]

    try:
        parse_json(code_block)
    except ValueError as e:
        raise InvalidIssueBodyError(f"Code block is not valid JSON: {e}") from e

    return code_block


def is_valid_body(body: str | None) -> bool:
    """Return True if the body embeds a single valid data block."""
    try:
        extract_json_block(body)
    except InvalidIssueBodyError as e:
        logger.debug("Invalid issue body: %s", e.reason)
        return False
    return True
