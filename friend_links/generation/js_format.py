"""Rendering JSON values as JavaScript object literal source."""

import json
import re
from typing import Any

_IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z_$][a-zA-Z0-9_$]*")

RESERVED_WORDS = frozenset(
    {
        "class", "const", "let", "var", "function", "return", "if", "else",
        "for", "while", "do", "switch", "case", "default", "break", "continue",
        "try", "catch", "finally", "throw", "new", "this", "super", "extends",
        "import", "export", "from", "as", "async", "await", "yield", "static",
        "public", "private", "protected",
    }
)  # fmt: skip

INDENT = "  "


def is_valid_js_identifier(name: str) -> bool:
    """Check if a key can be written unquoted."""
    return (
        _IDENTIFIER_PATTERN.fullmatch(name) is not None
        and name not in RESERVED_WORDS
    )


def _quote(value: str) -> str:
    # Backslash first so later escapes are not doubled
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def to_js_literal(value: Any, indent_level: int = 0) -> str:
    """Recursively render a JSON value with two-space indentation."""
    indent = INDENT * indent_level
    next_indent = INDENT * (indent_level + 1)

    if isinstance(value, dict):
        if not value:
            return "{}"
        items = []
        for key, item in value.items():
            key = str(key)
            js_key = key if is_valid_js_identifier(key) else _quote(key)
            items.append(
                f"{next_indent}{js_key}: {to_js_literal(item, indent_level + 1)}"
            )
        return "{\n" + ",\n".join(items) + "\n" + indent + "}"

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = [
            f"{next_indent}{to_js_literal(item, indent_level + 1)}" for item in value
        ]
        return "[\n" + ",\n".join(items) + "\n" + indent + "]"

    if isinstance(value, str):
        return _quote(value)

    if isinstance(value, bool):
        return "true" if value else "false"

    if value is None:
        return "null"

    if isinstance(value, (int, float)):
        return json.dumps(value)

    raise TypeError(f"Value of type {type(value).__name__} is not JSON")


def json_to_js_object(data: list[Any]) -> str:
    """Render a list of JSON values as a JavaScript array literal."""
    return to_js_literal(list(data), 0)
