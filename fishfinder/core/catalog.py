"""
Catalog loading for FishFinder.

Loads the fish catalog once, from the configured URL or local file, and hands
it out as an immutable tuple of records.
"""

import httpx

from ..clients import catalog as catalog_client
from ..config import Settings
from ..utils.exceptions import DataMappingError, LoadError
from ..utils.logging import get_logger, operation_logger
from . import mappers
from .models import FishRecord

logger = get_logger(__name__)


def catalog_source(settings: Settings) -> str:
    """Describe where the catalog will be loaded from."""
    return settings.catalog_url or str(settings.catalog_path)


async def load_catalog(
    settings: Settings, client: httpx.AsyncClient | None = None
) -> tuple[FishRecord, ...]:
    """
    Load the full fish catalog.

    Raises:
        LoadError: the document could not be fetched, decoded or mapped.
    """
    source = catalog_source(settings)

    with operation_logger("load_catalog", source=source):
        if settings.catalog_url:
            document = await catalog_client.fetch_catalog_document(
                settings.catalog_url, settings, client
            )
        else:
            document = await catalog_client.read_catalog_document(
                settings.catalog_path
            )

        try:
            records = mappers.map_catalog_document(document)
        except DataMappingError as e:
            raise LoadError(
                f"Catalog could not be parsed: {e.message}", source=source
            ) from e

        logger.info("Fish catalog loaded", fish_count=len(records))
        return records


async def load_catalog_or_empty(
    settings: Settings, client: httpx.AsyncClient | None = None
) -> tuple[FishRecord, ...]:
    """Load the catalog, treating a failed load as an empty catalog."""
    try:
        return await load_catalog(settings, client)
    except LoadError as e:
        logger.warning(
            "Fish catalog unavailable, continuing with no fish",
            error=e.message,
            source=catalog_source(settings),
        )
        return ()
