"""Unit tests for configuration schema, loader and adapter.

These tests verify:
- Valid room creation files are loaded with defaults applied
- Invalid values and unknown fields are rejected
- Schema version validation
- Loader error handling (file not found, JSON parse errors)
- Listing catalog loading in both file shapes
- Conversion to request DTOs, schedules and listings
"""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from furnishing.application.config import (
    SUPPORTED_VERSIONS,
    AnnealingConfig,
    ConfigError,
    ListingCatalogConfig,
    ListingConfig,
    RoomCreationConfig,
    SelectionTypeConfig,
    catalog_to_listings,
    config_to_request,
    config_to_schedule,
    load_catalog,
    load_config,
    load_config_from_dict,
)
from furnishing.application.dtos import FurnitureSelectionType
from furnishing.domain.value_objects import AnnealingSchedule, RoomCategory


def minimal_config() -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "room_description": {"width_in_meters": 4.0, "depth_in_meters": 3.0},
    }


def write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestRoomCreationConfig:
    """Tests for RoomCreationConfig."""

    def test_defaults(self) -> None:
        config = RoomCreationConfig.model_validate(minimal_config())
        assert config.fill_target == 0.3
        assert config.furniture_selection_type is SelectionTypeConfig.RANDOM
        assert config.furniture_search_selection_keywords == []
        assert config.seed is None
        assert config.room_description.height_in_meters == 2.5
        assert config.room_description.room_category is RoomCategory.LIVING_ROOM
        assert config.annealing == AnnealingConfig()

    def test_room_category_by_value(self) -> None:
        data = minimal_config()
        data["room_description"]["room_category"] = "dining room"
        config = RoomCreationConfig.model_validate(data)
        assert config.room_description.room_category is RoomCategory.DINING_ROOM

    @pytest.mark.parametrize("fill_target", [0, -0.5, 1.01])
    def test_fill_target_range(self, fill_target: float) -> None:
        data = minimal_config()
        data["fill_target"] = fill_target
        with pytest.raises(PydanticValidationError):
            RoomCreationConfig.model_validate(data)

    def test_negative_width_rejected(self) -> None:
        data = minimal_config()
        data["room_description"]["width_in_meters"] = -4.0
        with pytest.raises(PydanticValidationError):
            RoomCreationConfig.model_validate(data)

    def test_unknown_field_rejected(self) -> None:
        data = minimal_config()
        data["furniture"] = []
        with pytest.raises(PydanticValidationError) as exc_info:
            RoomCreationConfig.model_validate(data)
        assert "extra" in str(exc_info.value).lower()

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        data = minimal_config()
        data["schema_version"] = "1.3"
        assert RoomCreationConfig.model_validate(data).schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        data = minimal_config()
        data["schema_version"] = "2.0"
        with pytest.raises(PydanticValidationError) as exc_info:
            RoomCreationConfig.model_validate(data)
        assert "Unsupported schema version" in str(exc_info.value)

    def test_matching_search_requires_keywords(self) -> None:
        data = minimal_config()
        data["furniture_selection_type"] = "matching search"
        data["furniture_search_selection_keywords"] = ["  ", ""]
        with pytest.raises(PydanticValidationError) as exc_info:
            RoomCreationConfig.model_validate(data)
        assert "must not be empty" in str(exc_info.value)

    def test_keywords_are_stripped(self) -> None:
        data = minimal_config()
        data["furniture_selection_type"] = "matching search"
        data["furniture_search_selection_keywords"] = [" walnut ", "", "oak"]
        config = RoomCreationConfig.model_validate(data)
        assert config.furniture_search_selection_keywords == ["walnut", "oak"]


class TestAnnealingConfig:
    """Tests for AnnealingConfig."""

    def test_defaults_match_schedule(self) -> None:
        assert config_to_schedule(AnnealingConfig()) == AnnealingSchedule()

    def test_min_temperature_below_initial(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            AnnealingConfig(initial_temperature=0.5, min_temperature=0.5)
        assert "must be below" in str(exc_info.value)

    @pytest.mark.parametrize("cooling_rate", [0.0, 1.0])
    def test_cooling_rate_range(self, cooling_rate: float) -> None:
        with pytest.raises(PydanticValidationError):
            AnnealingConfig(cooling_rate=cooling_rate)


class TestListingConfig:
    """Tests for listing catalog models."""

    def test_lists_are_joined(self) -> None:
        listing = ListingConfig.model_validate(
            {
                "id": "L-1",
                "name": "Chair",
                "colors": ["black", "walnut"],
                "keywords": ["chair"],
                "dimensions": {"width": 45, "depth": 50, "height": 80},
            }
        )
        assert listing.colors == "black|walnut"
        assert listing.keywords == "chair"

    def test_zero_width_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            ListingConfig.model_validate(
                {"id": "L-1", "name": "Chair", "dimensions": {"width": 0, "depth": 50}}
            )

    def test_duplicate_ids_rejected(self) -> None:
        listing = {"id": "L-1", "name": "Chair", "dimensions": {"width": 45, "depth": 50}}
        with pytest.raises(PydanticValidationError) as exc_info:
            ListingCatalogConfig.model_validate({"listings": [listing, listing]})
        assert "Duplicate listing ids" in str(exc_info.value)

    def test_catalog_unsupported_major_version(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            ListingCatalogConfig.model_validate({"schema_version": "2.0", "listings": []})
        assert "Unsupported schema version" in str(exc_info.value)

    def test_catalog_newer_minor_version_accepted(self) -> None:
        catalog = ListingCatalogConfig.model_validate({"schema_version": "1.4", "listings": []})
        assert catalog.schema_version == "1.4"


class TestLoader:
    """Tests for the configuration loader."""

    def test_load_fixture(self, fixtures_dir: Path) -> None:
        config = load_config(fixtures_dir / "living_room.json")
        assert config.room_description.width_in_meters == 4.572
        assert config.seed == 7
        assert config.annealing.cooling_rate == 0.05

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_validation_error_details(self, tmp_path: Path) -> None:
        data = minimal_config()
        data["room_description"]["width_in_meters"] = "wide"
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_json(tmp_path / "room.json", data))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path == tmp_path / "room.json"
        assert error.details[0]["path"] == "room_description.width_in_meters"
        assert "Configuration validation failed" in str(error)

    def test_load_from_dict(self) -> None:
        config = load_config_from_dict(minimal_config())
        assert config.room_description.depth_in_meters == 3.0

    def test_load_from_dict_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0"})
        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "room_description"

    def test_load_catalog_fixture(self, fixtures_dir: Path) -> None:
        catalog = load_catalog(fixtures_dir / "catalog.json")
        assert len(catalog.listings) == 11
        assert catalog.listings[0].id == "L-chair-01"

    def test_load_catalog_bare_list(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "catalog.json",
            [{"id": "L-1", "name": "Rug", "dimensions": {"width": 200, "depth": 300}}],
        )
        catalog = load_catalog(path)
        assert [listing.id for listing in catalog.listings] == ["L-1"]

    def test_catalog_validation_path(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "catalog.json",
            {"listings": [{"id": "L-1", "name": "Rug", "dimensions": {"width": -1, "depth": 3}}]},
        )
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(path)
        assert exc_info.value.details[0]["path"] == "listings[0].dimensions.width"


class TestAdapter:
    """Tests for configuration adapters."""

    def test_config_to_request(self) -> None:
        data = minimal_config()
        data.update(
            {
                "fill_target": 0.4,
                "furniture_selection_type": "matching search",
                "furniture_search_selection_keywords": ["walnut"],
            }
        )
        request = config_to_request(load_config_from_dict(data))
        assert request.fill_target == 0.4
        assert request.furniture_selection_type is FurnitureSelectionType.MATCHING_SEARCH
        assert request.furniture_search_selection_keywords == ["walnut"]
        assert request.room_description.width_in_meters == 4.0
        assert request.room_description.room_category is RoomCategory.LIVING_ROOM
        assert request.validate() == []

    def test_config_to_schedule(self) -> None:
        schedule = config_to_schedule(
            AnnealingConfig(cooling_rate=0.01, max_seconds=5.0, progress_interval=50)
        )
        assert schedule.cooling_rate == 0.01
        assert schedule.max_seconds == 5.0
        assert schedule.progress_interval == 50

    def test_catalog_to_listings(self, fixtures_dir: Path) -> None:
        listings = catalog_to_listings(load_catalog(fixtures_dir / "catalog.json"))
        chair = listings[0]
        assert chair.name == "Spindle Dining Chair"
        assert chair.color_list == ["walnut", "black"]
        assert chair.keyword_list == ["chair", "chairs", "dining"]
        assert chair.dimensions.width == 45
