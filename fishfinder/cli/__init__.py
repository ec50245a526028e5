"""
Command-line interface module for FishFinder.

Typer application with Rich formatting over the catalog and search filters.
"""

from .main import app

__all__ = ["app"]
