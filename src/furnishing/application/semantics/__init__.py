"""Declarative furnishing semantics: categories, spatial rules and room priorities."""

from .categories import (
    FITTING_CATEGORIES,
    category_by_name,
    category_names,
    classify_listing,
)
from .rooms import BESPOKE_ROOM_PRIORITIES, build_room_semantics, generic_priorities
from .spatial import (
    CHAIR_FAMILY,
    CLEARANCE_AREAS,
    SPATIAL_SEMANTICS,
    clearance_areas_for,
    default_clearance_areas,
    default_spatial_semantics,
)

__all__ = [
    "BESPOKE_ROOM_PRIORITIES",
    "CHAIR_FAMILY",
    "CLEARANCE_AREAS",
    "FITTING_CATEGORIES",
    "SPATIAL_SEMANTICS",
    "build_room_semantics",
    "category_by_name",
    "category_names",
    "classify_listing",
    "clearance_areas_for",
    "default_clearance_areas",
    "default_spatial_semantics",
    "generic_priorities",
]
