"""Configuration schema and loading system for room furnishing.

This package provides JSON-based configuration loading and validation for
room creation requests and listing catalogs. It includes Pydantic models
for schema validation, a loader with comprehensive error handling, and
adapters to application DTOs and domain objects.

Public API:
    - RoomCreationConfig: Root room creation model
    - RoomDescriptionConfig: Room dimensions and category
    - AnnealingConfig: Annealing schedule constants
    - SelectionTypeConfig: Listing selection mode enum
    - ListingCatalogConfig: Root listing catalog model
    - ListingConfig: One catalog listing
    - load_config: Load a room creation file
    - load_config_from_dict: Load a room creation dictionary
    - load_catalog: Load a listing catalog file
    - ConfigError: Exception for configuration errors
    - config_to_request: Convert config to RoomCreationRequest
    - config_to_schedule: Convert config to AnnealingSchedule
    - catalog_to_listings: Convert a catalog to domain listings

Example:
    >>> from pathlib import Path
    >>> from furnishing.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"Room: {config.room_description.room_category.value}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from furnishing.application.config.adapter import (
    catalog_to_listings,
    config_to_request,
    config_to_schedule,
    listing_config_to_listing,
)
from furnishing.application.config.loader import (
    ConfigError,
    load_catalog,
    load_config,
    load_config_from_dict,
)
from furnishing.application.config.schema import (
    SUPPORTED_VERSIONS,
    AnnealingConfig,
    ListingCatalogConfig,
    ListingConfig,
    ListingDimensionsConfig,
    RoomCreationConfig,
    RoomDescriptionConfig,
    SelectionTypeConfig,
)

__all__ = [
    "AnnealingConfig",
    "ConfigError",
    "ListingCatalogConfig",
    "ListingConfig",
    "ListingDimensionsConfig",
    "RoomCreationConfig",
    "RoomDescriptionConfig",
    "SUPPORTED_VERSIONS",
    "SelectionTypeConfig",
    "catalog_to_listings",
    "config_to_request",
    "config_to_schedule",
    "listing_config_to_listing",
    "load_catalog",
    "load_config",
    "load_config_from_dict",
]
