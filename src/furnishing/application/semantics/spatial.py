"""Default spatial semantics and clearance areas per fitting category.

Categories without a bespoke record get the default semantics (equilateral,
no wall contact, no relations) and all-zero clearances.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from furnishing.domain.value_objects import (
    ClearanceArea,
    FittingCategorySpatialSemantics,
    Orientedness,
    Side,
    SpatialRelation,
)

from .categories import category_names

__all__ = [
    "CHAIR_FAMILY",
    "CLEARANCE_AREAS",
    "SPATIAL_SEMANTICS",
    "clearance_areas_for",
    "default_clearance_areas",
    "default_spatial_semantics",
]

# Seating that gathers around a table.
CHAIR_FAMILY = ("chair", "patio chair", "stool", "ottoman", "bench")

_NEXT_TO_TABLE = SpatialRelation(
    related_fitting_category="table",
    ideal_distance=0.2,
    right_side_probability=1.0,
    back_side_probability=1.0,
    left_side_probability=0.5,
    front_side_probability=0.5,
)


def _clearances(
    *, front: float = 0.0, back: float = 0.0, right: float = 0.0, left: float = 0.0
) -> tuple[ClearanceArea, ...]:
    return (
        ClearanceArea(Side.RIGHT, right),
        ClearanceArea(Side.BACK, back),
        ClearanceArea(Side.LEFT, left),
        ClearanceArea(Side.FRONT, front),
    )


def default_spatial_semantics(fitting_category: str) -> FittingCategorySpatialSemantics:
    return FittingCategorySpatialSemantics(fitting_category=fitting_category)


def default_clearance_areas() -> tuple[ClearanceArea, ...]:
    return _clearances()


_BESPOKE_SEMANTICS: list[FittingCategorySpatialSemantics] = [
    *(
        FittingCategorySpatialSemantics(
            fitting_category=name,
            orientedness=Orientedness.ORIENTED,
            spatial_relations=(_NEXT_TO_TABLE,),
        )
        for name in CHAIR_FAMILY
    ),
    FittingCategorySpatialSemantics(
        fitting_category="sofa",
        orientedness=Orientedness.ORIENTED,
        has_ideal_wall_contact=True,
    ),
    FittingCategorySpatialSemantics(
        fitting_category="armchair",
        orientedness=Orientedness.ORIENTED,
        spatial_relations=(
            SpatialRelation(
                related_fitting_category="side table",
                ideal_distance=0.25,
                right_side_probability=1.0,
                back_side_probability=0.0,
                left_side_probability=0.1,
                front_side_probability=0.1,
            ),
        ),
    ),
    FittingCategorySpatialSemantics(fitting_category="table"),
    FittingCategorySpatialSemantics(fitting_category="side table"),
    FittingCategorySpatialSemantics(
        fitting_category="coffee table",
        spatial_relations=(
            SpatialRelation(
                related_fitting_category="sofa",
                ideal_distance=0.25,
                right_side_probability=1.0,
                back_side_probability=0.0,
                left_side_probability=0.1,
                front_side_probability=0.1,
            ),
        ),
    ),
]

_BESPOKE_CLEARANCES: dict[str, tuple[ClearanceArea, ...]] = {
    **{
        name: _clearances(front=0.27, back=0.27, right=0.1, left=0.1)
        for name in CHAIR_FAMILY
    },
    "sofa": _clearances(front=0.25),
    "armchair": _clearances(front=0.25),
}


def _build_spatial_semantics() -> Mapping[str, FittingCategorySpatialSemantics]:
    bespoke = {semantics.fitting_category: semantics for semantics in _BESPOKE_SEMANTICS}
    table = {
        name: bespoke.get(name) or default_spatial_semantics(name)
        for name in category_names()
    }
    unknown = set(bespoke) - set(table)
    if unknown:
        raise ValueError(f"Spatial semantics for unknown categories: {sorted(unknown)}")
    return MappingProxyType(table)


SPATIAL_SEMANTICS: Mapping[str, FittingCategorySpatialSemantics] = _build_spatial_semantics()

CLEARANCE_AREAS: Mapping[str, tuple[ClearanceArea, ...]] = MappingProxyType(
    {name: _BESPOKE_CLEARANCES.get(name, default_clearance_areas()) for name in category_names()}
)


def clearance_areas_for(fitting_category: str) -> tuple[ClearanceArea, ...]:
    """Clearances for a category, all-zero when it has no bespoke entry."""
    return CLEARANCE_AREAS.get(fitting_category, default_clearance_areas())
