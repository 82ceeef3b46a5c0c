"""Unit tests for infrastructure components.

These tests verify:
- In-memory catalog search by category, keyword and color
- Progress sinks
- Layout summary formatting
- Room configuration JSON export
"""

import json
import logging
import math
import random
from pathlib import Path
from typing import Callable

import pytest

from furnishing.application.dtos import FurnishRoomOutput
from furnishing.domain import (
    FittingLayout,
    FittingModel,
    FittingSemantics,
    FurnishingResult,
    Room,
)
from furnishing.domain.services import AnnealingProgress
from furnishing.domain.value_objects import (
    Listing,
    ListingDimensions,
    ListingQuery,
    RoomConfiguration,
)
from furnishing.infrastructure import (
    InMemoryListingCatalog,
    LayoutSummaryFormatter,
    LoggingProgressSink,
    RecordingProgressSink,
    RoomConfigurationJsonExporter,
    describe_snapshot,
)


@pytest.fixture
def catalog(fixtures_dir: Path) -> InMemoryListingCatalog:
    return InMemoryListingCatalog.from_file(fixtures_dir / "catalog.json", rng=random.Random(0))


@pytest.fixture
def layout(
    empty_semantics: FittingSemantics,
    make_room: Callable[..., Room],
    make_model: Callable[..., FittingModel],
) -> FittingLayout:
    layout = FittingLayout.with_fittings_placed_at_origin(
        make_room(4.0, 3.0),
        [make_model("table", 1.5, 0.8), make_model("chair", 0.45, 0.5)],
        empty_semantics,
    )
    layout.placed_fittings[1].move_in_direction(1.2, 0.0)
    return layout


class TestInMemoryListingCatalog:
    """Tests for InMemoryListingCatalog."""

    def test_loads_fixture(self, catalog: InMemoryListingCatalog) -> None:
        assert len(catalog) == 11

    def test_search_by_category(self, catalog: InMemoryListingCatalog) -> None:
        listing = catalog.find_one(ListingQuery(search_text="coffee table"))
        assert listing is not None
        assert listing.id == "L-coffeetable-01"

    def test_search_by_listing_keyword(self, catalog: InMemoryListingCatalog) -> None:
        listing = catalog.find_one(ListingQuery(search_text="lighting"))
        assert listing is not None
        assert listing.id == "L-floorlight-01"

    def test_keyword_filter_matches_keywords_or_name(
        self, catalog: InMemoryListingCatalog
    ) -> None:
        by_keyword = catalog.find_one(ListingQuery(search_text="chair", keyword="dining"))
        by_name = catalog.find_one(ListingQuery(search_text="table", keyword="walnut"))
        assert by_keyword is not None and by_keyword.id == "L-chair-01"
        assert by_name is not None and by_name.id == "L-table-01"
        assert catalog.find_one(ListingQuery(search_text="table", keyword="marble")) is None

    def test_color_filter(self, catalog: InMemoryListingCatalog) -> None:
        assert catalog.find_one(ListingQuery(search_text="chair", color="Walnut")) is not None
        assert catalog.find_one(ListingQuery(search_text="chair", color="red")) is None

    def test_no_match(self, catalog: InMemoryListingCatalog) -> None:
        assert catalog.find_one(ListingQuery(search_text="wardrobe")) is None

    def test_random_pick_among_matches(self) -> None:
        """Every matching listing is eventually picked."""
        listings = [
            Listing(f"L-{i}", f"Chair {i}", "", "chair", ListingDimensions(45, 50, 80))
            for i in range(3)
        ]
        catalog = InMemoryListingCatalog(listings, rng=random.Random(1))
        picked = {catalog.find_one(ListingQuery(search_text="chair")).id for _ in range(50)}
        assert picked == {"L-0", "L-1", "L-2"}


class TestProgressSinks:
    """Tests for progress sinks."""

    def test_recording_sink(self, layout: FittingLayout) -> None:
        sink = RecordingProgressSink()
        sink.try_render(layout, "initial fitting layout")
        sink.try_render(AnnealingProgress(10, 0.5, 0.3, 0.2), "annealing")
        assert sink.labels == ["initial fitting layout", "annealing"]
        assert sink.records[0][1] is layout

    def test_logging_sink(
        self, layout: FittingLayout, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            LoggingProgressSink().try_render(layout, "final fitting layout")
        assert "final fitting layout: 2 fittings" in caplog.text

    def test_describe_snapshot(self, layout: FittingLayout) -> None:
        assert describe_snapshot(AnnealingProgress(10, 0.5, 0.3, 0.2)) == (
            "iteration 10, temperature 0.500000, current 0.3000, best 0.2000"
        )
        assert describe_snapshot(layout.room.description) == "living room 4.00m x 3.00m"
        assert describe_snapshot(42) == "42"


class TestLayoutSummaryFormatter:
    """Tests for LayoutSummaryFormatter."""

    def test_summary(self, layout: FittingLayout) -> None:
        text = LayoutSummaryFormatter().format(layout)
        assert text.startswith("FITTING LAYOUT")
        assert "Room: living room, 4.00m x 3.00m" in text
        assert "table" in text
        assert "chair" in text
        assert "Fittings: 2" in text
        assert f"Layout cost: {layout.get_cost():.4f}" in text
        assert "Ovl%" in text

    def test_overlap_share_column(self, layout: FittingLayout) -> None:
        """A chair standing on the table is reported as fully covered."""
        layout.placed_fittings[1].move_in_direction(0.7, math.pi)
        text = LayoutSummaryFormatter().format(layout)
        chair_row = next(line for line in text.splitlines() if line.startswith("chair "))
        assert "100.0" in chair_row

    def test_cost_terms(self, layout: FittingLayout) -> None:
        text = LayoutSummaryFormatter(include_cost_terms=True).format(layout)
        assert "Ovl" in text
        assert "Rel" in text

    def test_empty_layout(
        self, empty_semantics: FittingSemantics, make_room: Callable[..., Room]
    ) -> None:
        layout = FittingLayout.with_fittings_placed_at_origin(make_room(), [], empty_semantics)
        assert LayoutSummaryFormatter().format(layout) == "No fittings placed."


class TestRoomConfigurationJsonExporter:
    """Tests for RoomConfigurationJsonExporter."""

    def test_export(self, layout: FittingLayout) -> None:
        configuration = layout.to_room_configuration(lambda: "id")
        data = json.loads(RoomConfigurationJsonExporter().export(configuration))
        assert data["area_size_x"] == 4.0
        assert [obj["category"] for obj in data["objects"]] == ["table", "chair"]
        assert data["objects"][1]["x"] == pytest.approx(1.2)

    def test_export_output_with_stats(self, layout: FittingLayout) -> None:
        result = FurnishingResult(
            layout=layout,
            initial_cost=0.5,
            best_cost=0.1,
            iterations=90,
            elapsed_seconds=0.1234,
        )
        output = FurnishRoomOutput(
            room_configuration=layout.to_room_configuration(),
            result=result,
            skipped_categories=["bed"],
        )
        data = json.loads(RoomConfigurationJsonExporter().export_output(output))
        assert data["furnishing"] == {
            "initial_cost": 0.5,
            "best_cost": 0.1,
            "iterations": 90,
            "elapsed_seconds": 0.123,
            "timed_out": False,
        }
        assert data["skipped_categories"] == ["bed"]
        assert len(data["objects"]) == 2

    def test_export_output_errors(self) -> None:
        output = FurnishRoomOutput(errors=["No fitting model found"])
        data = json.loads(RoomConfigurationJsonExporter().export_output(output))
        assert data == {"errors": ["No fitting model found"]}

    def test_export_empty_configuration(self) -> None:
        configuration = RoomConfiguration(id="r", area_size_x=2.0, area_size_z=2.0)
        data = json.loads(RoomConfigurationJsonExporter().export(configuration))
        assert data["objects"] == []
