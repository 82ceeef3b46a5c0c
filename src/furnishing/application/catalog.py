"""Fitting semantics construction from a listing catalog.

One representative listing is looked up per known fitting category and
combined with the category's static spatial semantics and clearances into
a fitting model.
"""

from __future__ import annotations

import logging

from furnishing.contracts import ListingSearchProtocol
from furnishing.domain import FittingModel, FittingSemantics
from furnishing.domain.errors import FurnishingConfigurationError
from furnishing.domain.value_objects import FittingCategory, Listing, ListingQuery

from .dtos import FurnitureSelectionType, RoomCreationRequest
from .semantics import (
    FITTING_CATEGORIES,
    SPATIAL_SEMANTICS,
    build_room_semantics,
    clearance_areas_for,
)

logger = logging.getLogger(__name__)

__all__ = [
    "find_representative_listing",
    "generate_fitting_models",
    "generate_fitting_semantics",
    "missing_categories",
]


def find_representative_listing(
    listing_search: ListingSearchProtocol,
    fitting_category: FittingCategory,
    keywords: list[str] | tuple[str, ...],
) -> Listing | None:
    """Search for the category name with each keyword in turn; first hit wins.

    With no keywords the category name is searched on its own.
    """
    if not keywords:
        return listing_search.find_one(ListingQuery(search_text=fitting_category.name))
    for keyword in keywords:
        listing = listing_search.find_one(
            ListingQuery(search_text=fitting_category.name, keyword=keyword)
        )
        if listing is not None:
            return listing
    return None


def generate_fitting_models(
    request: RoomCreationRequest, listing_search: ListingSearchProtocol
) -> list[FittingModel]:
    """Build at most one fitting model per known category.

    Categories without a matching listing are skipped with a warning.

    Raises:
        FurnishingConfigurationError: If matching search mode has no keywords.
    """
    matching_search = (
        request.furniture_selection_type is FurnitureSelectionType.MATCHING_SEARCH
    )
    if matching_search and not request.furniture_search_selection_keywords:
        raise FurnishingConfigurationError(
            "Furniture search selection keywords are required for matching search selection"
        )

    fitting_models: list[FittingModel] = []
    for fitting_category in FITTING_CATEGORIES:
        if matching_search:
            keywords = request.furniture_search_selection_keywords
        else:
            keywords = fitting_category.associated_keywords

        listing = find_representative_listing(listing_search, fitting_category, keywords)
        if listing is None:
            logger.warning(
                f"No listing found to create fitting model for {fitting_category.name}"
            )
            continue

        logger.debug(f"Using listing {listing.id} for {fitting_category.name}")
        fitting_models.append(
            FittingModel.from_listing_and_semantics(
                listing=listing,
                fitting_category=fitting_category.name,
                clearance_areas=clearance_areas_for(fitting_category.name),
                category_semantics=SPATIAL_SEMANTICS[fitting_category.name],
            )
        )
    return fitting_models


def generate_fitting_semantics(
    request: RoomCreationRequest, listing_search: ListingSearchProtocol
) -> FittingSemantics:
    """Build the full fitting semantics for a room creation request.

    Args:
        request: Room description and listing selection mode.
        listing_search: Catalog search collaborator.

    Returns:
        Spatial semantics for every category, the fitting models found and
        priorities for every room category.

    Raises:
        FurnishingConfigurationError: If matching search mode has no keywords.
    """
    fitting_models = generate_fitting_models(request, listing_search)
    return FittingSemantics(
        category_semantics=SPATIAL_SEMANTICS,
        fitting_models=fitting_models,
        room_semantics=build_room_semantics(),
    )


def missing_categories(fitting_semantics: FittingSemantics) -> list[str]:
    """Known categories for which no fitting model was found."""
    return [
        category.name
        for category in FITTING_CATEGORIES
        if not fitting_semantics.models_for_category(category.name)
    ]
