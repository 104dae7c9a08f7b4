"""Writing generated friend link data to disk."""

import json
from pathlib import Path

from rich.console import Console

from ..generation.grouping import GroupedOutput
from ..generation.js_format import json_to_js_object

console = Console()


def _to_plain(groups: list[GroupedOutput]) -> list[dict]:
    return [group.model_dump(by_alias=True) for group in groups]


def render_json(groups: list[GroupedOutput]) -> str:
    """Render the groups as indented JSON text."""
    return json.dumps(_to_plain(groups), indent=2, ensure_ascii=False)


def render_js(groups: list[GroupedOutput]) -> str:
    """Render the groups as a JavaScript array literal."""
    return json_to_js_object(_to_plain(groups))


class OutputWriter:
    """Writes generated artifacts as UTF-8 text files."""

    def write_text(self, content: str, path: str | Path) -> Path:
        """Write already rendered text, followed by a newline.

        Args:
            content: Rendered artifact text
            path: Destination file

        Returns:
            Path to the saved file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
        except OSError as e:
            console.print(f"Error writing {path}: {e}")
            raise

        console.print(f"Saved friend link data to {path}")
        return path

    def write_json(self, groups: list[GroupedOutput], path: str | Path) -> Path:
        """Write the groups as a JSON file.

        Args:
            groups: Assembled groups, in output order
            path: Destination file

        Returns:
            Path to the saved file
        """
        return self.write_text(render_json(groups), path)

    def write_js(self, groups: list[GroupedOutput], path: str | Path) -> Path:
        """Write the groups as a JavaScript object literal file."""
        return self.write_text(render_js(groups), path)
