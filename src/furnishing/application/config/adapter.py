"""Adapter to convert configuration models to DTOs and domain objects.

This module transforms the Pydantic-based RoomCreationConfig and
ListingCatalogConfig into the RoomCreationRequest DTO, the domain
AnnealingSchedule and domain Listing value objects.
"""

from furnishing.application.config.schema import (
    AnnealingConfig,
    ListingCatalogConfig,
    ListingConfig,
    RoomCreationConfig,
)
from furnishing.application.dtos import FurnitureSelectionType, RoomCreationRequest
from furnishing.domain import RoomDescription
from furnishing.domain.value_objects import AnnealingSchedule, Listing, ListingDimensions


def config_to_request(config: RoomCreationConfig) -> RoomCreationRequest:
    """Convert a RoomCreationConfig to a RoomCreationRequest DTO.

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> request = config_to_request(config)
        >>> output = FurnishRoomCommand(catalog).execute(request)
    """
    description = config.room_description
    return RoomCreationRequest(
        room_description=RoomDescription(
            width_in_meters=description.width_in_meters,
            depth_in_meters=description.depth_in_meters,
            height_in_meters=description.height_in_meters,
            room_category=description.room_category,
        ),
        fill_target=config.fill_target,
        furniture_selection_type=FurnitureSelectionType(config.furniture_selection_type.value),
        furniture_search_selection_keywords=list(config.furniture_search_selection_keywords),
    )


def config_to_schedule(annealing: AnnealingConfig) -> AnnealingSchedule:
    """Convert an AnnealingConfig to the domain AnnealingSchedule."""
    return AnnealingSchedule(
        initial_temperature=annealing.initial_temperature,
        cooling_rate=annealing.cooling_rate,
        min_temperature=annealing.min_temperature,
        step_length=annealing.step_length,
        max_seconds=annealing.max_seconds,
        progress_interval=annealing.progress_interval,
    )


def listing_config_to_listing(listing: ListingConfig) -> Listing:
    return Listing(
        id=listing.id,
        name=listing.name,
        colors=listing.colors,
        keywords=listing.keywords,
        dimensions=ListingDimensions(
            width=listing.dimensions.width,
            depth=listing.dimensions.depth,
            height=listing.dimensions.height,
        ),
    )


def catalog_to_listings(catalog: ListingCatalogConfig) -> list[Listing]:
    """Convert every catalog entry to a domain Listing, preserving order."""
    return [listing_config_to_listing(listing) for listing in catalog.listings]
