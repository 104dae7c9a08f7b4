"""Command line interface for the friend link generator."""
