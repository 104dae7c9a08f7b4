"""Friend link data generator driven by GitHub issues."""

__version__ = "0.1.0"
