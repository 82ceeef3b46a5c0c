"""Catalog listing value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._geometry import BoundingBox3D


@dataclass(frozen=True)
class ListingDimensions:
    """Listing dimensions in centimeters, as stored in the catalog."""

    width: float
    depth: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.height < 0:
            raise ValueError("Listing width and depth must be positive")

    def to_bounding_box(self) -> BoundingBox3D:
        """Convert to a bounding box in meters."""
        return BoundingBox3D.from_centimeters(self.width, self.depth, self.height)


@dataclass(frozen=True)
class Listing:
    """A catalog item.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        colors: Pipe-delimited color names, e.g. ``"black|walnut"``.
        keywords: Pipe-delimited keywords.
        dimensions: Size in centimeters.
    """

    id: str
    name: str
    colors: str
    keywords: str
    dimensions: ListingDimensions

    @property
    def color_list(self) -> list[str]:
        return _split_pipes(self.colors)

    @property
    def keyword_list(self) -> list[str]:
        return _split_pipes(self.keywords)


@dataclass(frozen=True)
class ListingQuery:
    """Best-effort search for one listing.

    Attributes:
        search_text: Free text matched against listing names and keywords.
        keyword: Optional keyword the listing must carry.
        color: Optional color the listing must carry.
    """

    search_text: str
    keyword: str | None = None
    color: str | None = None


def _split_pipes(value: str) -> list[str]:
    return [part.strip() for part in value.split("|") if part.strip()]
