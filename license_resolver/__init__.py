"""Resolve license declarations from GitHub-hosted LICENSE file URLs."""

__version__ = "0.1.0"
