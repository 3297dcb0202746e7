"""Command-line interface for browsing and checking the catalog."""

from odeproblems.cli.app import app

__all__ = ["app"]
