"""
Fish catalog client functions.

Functional async fetchers for the raw catalog document, over HTTP or from
a local file. Both raise ``LoadError`` and never retry.
"""

import asyncio
import json
from pathlib import Path
from typing import Any

import httpx

from ..config import Settings
from ..utils.exceptions import LoadError
from ..utils.logging import get_logger

logger = get_logger(__name__)


async def fetch_catalog_document(
    url: str, settings: Settings, client: httpx.AsyncClient | None = None
) -> Any:
    """Fetch and decode the catalog JSON document from a URL."""
    should_close_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=settings.http_timeout)

    try:
        response = await client.get(url, headers={"Accept": "application/json"})
        response.raise_for_status()
        document = response.json()

    except httpx.HTTPStatusError as e:
        raise LoadError(
            f"Catalog request failed with HTTP {e.response.status_code}",
            source=url,
            status_code=e.response.status_code,
            network=True,
        ) from e
    except httpx.HTTPError as e:
        raise LoadError(
            f"Could not reach catalog: {e}", source=url, network=True
        ) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Catalog is not valid JSON: {e}", source=url) from e
    finally:
        if should_close_client:
            await client.aclose()

    logger.debug("Fetched catalog document", source=url)
    return document


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


async def read_catalog_document(path: Path) -> Any:
    """Read and decode the catalog JSON document from a local file."""
    try:
        document = await asyncio.to_thread(_read_json, path)
    except OSError as e:
        raise LoadError(f"Could not read catalog: {e}", source=str(path)) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Catalog is not valid JSON: {e}", source=str(path)) from e

    logger.debug("Read catalog document", source=str(path))
    return document
