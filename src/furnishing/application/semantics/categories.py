"""Known fitting categories and listing classification.

The table order matters: catalog construction walks it in order, and the
generic room priorities rank categories by their position in it.
"""

from __future__ import annotations

import re

from furnishing.domain.value_objects import FittingCategory, Listing, PlacementLocation

__all__ = [
    "FITTING_CATEGORIES",
    "category_by_name",
    "category_names",
    "classify_listing",
]

_WALL = PlacementLocation.WALL
_CEILING = PlacementLocation.CEILING
_FITTING = PlacementLocation.FITTING

FITTING_CATEGORIES: tuple[FittingCategory, ...] = (
    FittingCategory("rug", associated_keywords=("rug",)),
    # lighting
    FittingCategory("floor light", associated_keywords=("floor lamp",)),
    FittingCategory(
        "wall light",
        placement_location=_WALL,
        associated_keywords=("wall lamp", "table lamp", "pendant"),
    ),
    FittingCategory(
        "ceiling light", placement_location=_CEILING, associated_keywords=("chandelier",)
    ),
    FittingCategory(
        "light", placement_location=_FITTING, associated_keywords=("desk lamp", "table lamp")
    ),
    # seating
    FittingCategory("chair", associated_keywords=("chairs",)),
    FittingCategory("sofa", associated_keywords=("sofas", "loveseat", "sectional")),
    FittingCategory("armchair", associated_keywords=("recliner",)),
    FittingCategory("patio chair", name_matches=("patio seat",)),
    FittingCategory("stool", associated_keywords=("bar stool",), name_matches=("barstool",)),
    FittingCategory("ottoman"),
    FittingCategory("bench"),
    FittingCategory("mirror", placement_location=_WALL),
    # beds
    FittingCategory("bed", associated_keywords=("beds",)),
    FittingCategory("headboard", placement_location=_WALL),
    # storage
    FittingCategory("wardrobe"),
    FittingCategory(
        "dresser",
        associated_keywords=("bedside dresser",),
        name_matches=("chest of drawers",),
    ),
    FittingCategory("bookcase"),
    FittingCategory("vanity"),
    FittingCategory("desk"),
    FittingCategory("cupboard"),
    FittingCategory(
        "media cabinet",
        name_matches=("media cabinet", "mid-century console", "tv cabinet"),
    ),
    FittingCategory("kitchen cart"),
    FittingCategory("chest", name_matches=("movian lagan chest",)),
    FittingCategory(
        "wall shelving unit", placement_location=_WALL, name_matches=("hanging wall shelf",)
    ),
    FittingCategory(
        "shelving unit",
        associated_keywords=("shelf",),
        name_matches=("shelving unit", "tv stand"),
    ),
    # tables
    FittingCategory("table", associated_keywords=("buffet table",)),
    FittingCategory(
        "side table", associated_keywords=("end tables",), name_matches=("corona sideboard",)
    ),
    FittingCategory("coffee table"),
    FittingCategory("night stand", name_matches=("night stand",)),
    # decor
    FittingCategory("floor planter"),
    FittingCategory("wall planter", placement_location=_WALL),
    FittingCategory("planter", placement_location=_FITTING, name_matches=("planter",)),
    FittingCategory("ceiling fan", placement_location=_CEILING, name_matches=("ceiling fan",)),
    FittingCategory("wall clock", placement_location=_WALL),
    FittingCategory(
        "wall art",
        placement_location=_WALL,
        associated_keywords=("poster",),
        name_matches=("flag display case", "shutter wall art"),
    ),
    FittingCategory("picture frame", placement_location=_FITTING),
)

_BY_NAME = {category.name: category for category in FITTING_CATEGORIES}

_PUNCTUATION = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")


def category_names() -> list[str]:
    return [category.name for category in FITTING_CATEGORIES]


def category_by_name(name: str) -> FittingCategory:
    """Look up a category by its name.

    Raises:
        KeyError: If the category is unknown.
    """
    return _BY_NAME[name]


def _name_phrases(name: str) -> set[str]:
    """All runs of one to three consecutive words in a normalized listing name."""
    normalized = _WHITESPACE.sub(" ", _PUNCTUATION.sub(" ", name.lower())).strip()
    tokens = normalized.split(" ") if normalized else []
    phrases: set[str] = set()
    for size in (1, 2, 3):
        for start in range(len(tokens) - size + 1):
            phrases.add(" ".join(tokens[start : start + size]))
    return phrases


def classify_listing(listing: Listing) -> FittingCategory | None:
    """Infer the fitting category of a catalog listing.

    A listing keyword naming a category (or one of its associated keywords)
    wins first. Otherwise the listing name is searched for a category name,
    an associated keyword or a name match phrase.

    Returns:
        The matching category, or None. Keyword matches follow table order;
        name matches prefer the longest matching phrase.
    """
    keywords = {keyword.lower() for keyword in listing.keyword_list}
    for category in FITTING_CATEGORIES:
        if category.name in keywords or keywords.intersection(category.associated_keywords):
            return category

    phrases = _name_phrases(listing.name)
    best: FittingCategory | None = None
    best_length = 0
    for category in FITTING_CATEGORIES:
        candidates = {category.name, *category.associated_keywords, *category.name_matches}
        for phrase in phrases.intersection(candidates):
            # "coffee table" beats "table"
            if len(phrase) > best_length:
                best = category
                best_length = len(phrase)
    return best
