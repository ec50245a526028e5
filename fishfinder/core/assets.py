"""
Reference image locations for FishFinder.

Pure helpers resolving the fishing map, the lure and rarity info sheets and
per-fish image paths.
"""

from ..config import Settings

FISH_IMAGE_DIR = "fish"
FISH_IMAGE_EXTENSION = ".webp"


def _join(base: str, name: str) -> str:
    if not base:
        return name
    return f"{base.rstrip('/')}/{name.lstrip('/')}"


def fish_image_path(name: str) -> str:
    """Image path for a fish, keyed by its name with spaces as underscores."""
    return f"{FISH_IMAGE_DIR}/{'_'.join(name.split(' '))}{FISH_IMAGE_EXTENSION}"


def fish_image_location(name: str, settings: Settings) -> str:
    return _join(settings.asset_base_url, fish_image_path(name))


def map_image_location(settings: Settings) -> str:
    return _join(settings.asset_base_url, settings.map_image)


def info_image_location(settings: Settings) -> str:
    return _join(settings.asset_base_url, settings.info_image)


def rarity_image_location(settings: Settings) -> str:
    return _join(settings.asset_base_url, settings.rarity_image)


def info_sheet_locations(settings: Settings) -> list[str]:
    """Everything the info view shows: lure sheet, rarity sheet and the map."""
    return [
        info_image_location(settings),
        rarity_image_location(settings),
        map_image_location(settings),
    ]
