"""
Application settings using Pydantic BaseSettings.

Minimal configuration management with environment variable support.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "fish.json"


class Settings(BaseSettings):
    """Application configuration settings."""

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format: json or console")

    # Catalog source
    catalog_url: str | None = Field(
        default=None, description="URL of the fish catalog JSON document"
    )
    catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        description="Local fish catalog JSON, used when no URL is set",
    )

    # HTTP client configuration
    http_timeout: int = Field(default=30, description="HTTP request timeout in seconds")

    # Reference images
    asset_base_url: str = Field(default="/", description="Base location of image assets")
    map_image: str = Field(
        default="FishingMap_Names.png", description="Fishing map image file"
    )
    info_image: str = Field(default="lures.png", description="Lure info sheet image file")
    rarity_image: str = Field(
        default="rarity.jpg", description="Fish rarity sheet image file"
    )

    # Search defaults
    default_spot_policy: str = Field(
        default="include-any",
        description="Spot search policy: include-any or specific-only",
    )

    model_config = {
        "env_prefix": "FISHFINDER_",
        "env_file": ".env",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
