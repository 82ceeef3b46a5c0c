"""Pydantic configuration schema models for room furnishing.

This module defines the schema for JSON room creation files and listing
catalog files. It uses Pydantic v2 for validation and serialization.

The RoomCategory enum is reused from the domain layer to ensure consistency
and avoid duplication.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from furnishing.domain.value_objects import RoomCategory

# Supported schema versions for configuration files
# Version 1.0: Initial schema with room description, selection and annealing
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def check_supported_version(v: str) -> str:
    """Validate that a schema version is supported.

    Newer minor versions within a supported major version are accepted
    for forward compatibility.
    """
    if v in SUPPORTED_VERSIONS:
        return v

    major_version = int(v.split(".")[0])
    supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
    if major_version in supported_majors:
        return v

    raise ValueError(
        f"Unsupported schema version '{v}'. "
        f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
    )


class SelectionTypeConfig(str, Enum):
    """Listing selection mode for configuration.

    This enum mirrors the application FurnitureSelectionType but is used for
    configuration parsing.

    Attributes:
        RANDOM: Any listing matching the category and its keywords.
        MATCHING_SEARCH: A listing matching the category and a search keyword.
    """

    RANDOM = "random"
    MATCHING_SEARCH = "matching search"


class RoomDescriptionConfig(BaseModel):
    """Room dimensions in meters and the room category.

    Attributes:
        width_in_meters: Extent along x.
        depth_in_meters: Extent along z.
        height_in_meters: Ceiling height; not used for placement.
        room_category: Category selecting the fitting priorities.
    """

    model_config = ConfigDict(extra="forbid")

    width_in_meters: float = Field(..., gt=0, le=100)
    depth_in_meters: float = Field(..., gt=0, le=100)
    height_in_meters: float = Field(default=2.5, gt=0, le=20)
    room_category: RoomCategory = RoomCategory.LIVING_ROOM


class AnnealingConfig(BaseModel):
    """Simulated annealing constants.

    The defaults reproduce the reference schedule of roughly 57,000
    iterations.
    """

    model_config = ConfigDict(extra="forbid")

    initial_temperature: float = Field(default=1.0, gt=0)
    cooling_rate: float = Field(default=0.0002, gt=0, lt=1)
    min_temperature: float = Field(default=0.00001, gt=0)
    step_length: float = Field(default=0.1, gt=0)
    max_seconds: float | None = Field(
        default=None, gt=0, description="Wall-clock bound for the annealing loop"
    )
    progress_interval: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def validate_temperatures(self) -> "AnnealingConfig":
        """Ensure the schedule has something to cool through."""
        if self.min_temperature >= self.initial_temperature:
            raise ValueError(
                f"min_temperature ({self.min_temperature}) must be below "
                f"initial_temperature ({self.initial_temperature})"
            )
        return self


class RoomCreationConfig(BaseModel):
    """Root configuration model for furnishing one room.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        room_description: Room dimensions and category
        fill_target: Share of the floor area to cover, in (0, 1]
        furniture_selection_type: Listing selection mode
        furniture_search_selection_keywords: Keywords for matching search mode
        seed: Optional random seed for reproducible layouts
        annealing: Annealing schedule

    Example:
        >>> config = RoomCreationConfig(
        ...     schema_version="1.0",
        ...     room_description=RoomDescriptionConfig(
        ...         width_in_meters=4.572, depth_in_meters=3.6576
        ...     ),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    room_description: RoomDescriptionConfig
    fill_target: float = Field(default=0.3, gt=0, le=1)
    furniture_selection_type: SelectionTypeConfig = SelectionTypeConfig.RANDOM
    furniture_search_selection_keywords: list[str] = Field(default_factory=list)
    seed: int | None = Field(default=None, description="Random seed (optional)")
    annealing: AnnealingConfig = Field(default_factory=AnnealingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        return check_supported_version(v)

    @field_validator("furniture_search_selection_keywords")
    @classmethod
    def strip_keywords(cls, v: list[str]) -> list[str]:
        """Drop blank keywords and surrounding whitespace."""
        return [keyword.strip() for keyword in v if keyword.strip()]

    @model_validator(mode="after")
    def validate_search_keywords(self) -> "RoomCreationConfig":
        """Matching search mode needs at least one keyword."""
        if (
            self.furniture_selection_type == SelectionTypeConfig.MATCHING_SEARCH
            and not self.furniture_search_selection_keywords
        ):
            raise ValueError(
                "furniture_search_selection_keywords must not be empty when "
                "furniture_selection_type is 'matching search'"
            )
        return self


class ListingDimensionsConfig(BaseModel):
    """Listing dimensions in centimeters."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    height: float = Field(default=0.0, ge=0)


class ListingConfig(BaseModel):
    """One catalog listing.

    Colors and keywords use the catalog's pipe-delimited form, e.g.
    ``"black|walnut"``; lists are joined into that form.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    colors: str = ""
    keywords: str = ""
    dimensions: ListingDimensionsConfig

    @field_validator("colors", "keywords", mode="before")
    @classmethod
    def join_lists(cls, v: object) -> object:
        if isinstance(v, list):
            return "|".join(str(item) for item in v)
        return v


class ListingCatalogConfig(BaseModel):
    """Root model of a listing catalog file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    listings: list[ListingConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        return check_supported_version(v)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "ListingCatalogConfig":
        seen: set[str] = set()
        duplicates: set[str] = set()
        for listing in self.listings:
            if listing.id in seen:
                duplicates.add(listing.id)
            seen.add(listing.id)
        if duplicates:
            raise ValueError(f"Duplicate listing ids: {sorted(duplicates)}")
        return self
