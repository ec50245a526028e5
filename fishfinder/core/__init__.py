"""
Core logic for FishFinder.

Catalog loading, pure search filters, record mapping and session state.
"""

from . import assets, catalog, filters, mappers, models, session

__all__ = ["assets", "catalog", "filters", "mappers", "models", "session"]
