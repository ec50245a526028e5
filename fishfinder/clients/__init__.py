"""
Client modules for the catalog source.

Functional async client for fetching the fish catalog document.
"""

from . import catalog

__all__ = ["catalog"]
