"""Pytest configuration and shared fixtures for furnishing tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from furnishing.domain import (
    Fitting,
    FittingModel,
    FittingSemantics,
    Room,
    RoomDescription,
)
from furnishing.domain.value_objects import (
    AnnealingSchedule,
    ClearanceArea,
    FittingCategorySpatialSemantics,
    Listing,
    ListingDimensions,
    RoomCategory,
    Side,
    Vector2D,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Paths
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the JSON catalog and room creation fixtures."""
    return FIXTURES_DIR


# =============================================================================
# Builders
# =============================================================================


def no_clearances() -> tuple[ClearanceArea, ...]:
    return tuple(ClearanceArea(side, 0.0) for side in Side)


@pytest.fixture
def make_listing() -> Callable[..., Listing]:
    """Factory for listings with dimensions in centimeters."""

    def _make(
        listing_id: str = "L-1",
        name: str = "Test Listing",
        width: float = 50.0,
        depth: float = 50.0,
        height: float = 50.0,
        colors: str = "black",
        keywords: str = "",
    ) -> Listing:
        return Listing(
            id=listing_id,
            name=name,
            colors=colors,
            keywords=keywords,
            dimensions=ListingDimensions(width=width, depth=depth, height=height),
        )

    return _make


@pytest.fixture
def make_model(make_listing: Callable[..., Listing]) -> Callable[..., FittingModel]:
    """Factory for fitting models; width and depth are in meters."""

    def _make(
        category: str = "table",
        width: float = 1.0,
        depth: float = 1.0,
        semantics: FittingCategorySpatialSemantics | None = None,
        clearances: tuple[ClearanceArea, ...] | None = None,
    ) -> FittingModel:
        listing = make_listing(
            listing_id=f"L-{category}",
            name=category.title(),
            width=width * 100,
            depth=depth * 100,
        )
        return FittingModel.from_listing_and_semantics(
            listing=listing,
            fitting_category=category,
            clearance_areas=clearances or no_clearances(),
            category_semantics=semantics or FittingCategorySpatialSemantics(category),
        )

    return _make


@pytest.fixture
def make_fitting() -> Callable[..., Fitting]:
    """Factory for fittings at a position ``(x, z)``."""

    def _make(model: FittingModel, x: float = 0.0, z: float = 0.0, orientation: float = 0.0) -> Fitting:
        return Fitting(Vector2D(x, z), orientation, model)

    return _make


@pytest.fixture
def empty_semantics() -> FittingSemantics:
    """Fitting semantics with priorities for every room category and no models."""
    from furnishing.application.semantics import SPATIAL_SEMANTICS, build_room_semantics

    return FittingSemantics(
        category_semantics=SPATIAL_SEMANTICS,
        fitting_models=[],
        room_semantics=build_room_semantics(),
    )


@pytest.fixture
def make_room(empty_semantics: FittingSemantics) -> Callable[..., Room]:
    """Factory for rectangular rooms centred on the origin."""

    def _make(
        width: float = 4.0,
        depth: float = 4.0,
        category: RoomCategory = RoomCategory.LIVING_ROOM,
    ) -> Room:
        description = RoomDescription(
            width_in_meters=width,
            depth_in_meters=depth,
            height_in_meters=2.5,
            room_category=category,
        )
        return Room.from_description(empty_semantics, description)

    return _make


@pytest.fixture
def fast_schedule() -> AnnealingSchedule:
    """Short annealing schedule of about ninety iterations."""
    return AnnealingSchedule(cooling_rate=0.05, min_temperature=0.01, progress_interval=10)
