"""Output storage for generated friend link data."""

from .writer import OutputWriter, render_js, render_json

__all__ = ["OutputWriter", "render_js", "render_json"]
