"""In-memory listing catalog implementing best-effort search."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable

from furnishing.application.config import catalog_to_listings, load_catalog
from furnishing.application.semantics import classify_listing
from furnishing.domain.value_objects import Listing, ListingQuery

logger = logging.getLogger(__name__)


class InMemoryListingCatalog:
    """Searchable catalog held in memory.

    A listing matches a query's search text when the text names the
    listing's inferred fitting category or is one of its keywords. The
    optional keyword filter matches listing keywords or words in the name;
    the optional color filter matches listing colors. Among all matches one
    is picked at random.

    Attributes:
        listings: All listings, in catalog order.
        rng: Random source used to pick among matches.
    """

    def __init__(self, listings: Iterable[Listing], rng: random.Random | None = None) -> None:
        self.listings = list(listings)
        self.rng = rng or random.Random()
        self._categories = {
            listing.id: self._category_name(listing) for listing in self.listings
        }

    @classmethod
    def from_file(cls, path: Path, rng: random.Random | None = None) -> InMemoryListingCatalog:
        """Load a catalog JSON file.

        Raises:
            ConfigError: If the file cannot be loaded or validated.
        """
        catalog = cls(catalog_to_listings(load_catalog(path)), rng=rng)
        logger.debug(f"Loaded {len(catalog)} listings from {path}")
        return catalog

    def __len__(self) -> int:
        return len(self.listings)

    def find_one(self, query: ListingQuery) -> Listing | None:
        """Return one random listing matching ``query``, or None."""
        matches = [listing for listing in self.listings if self._matches(listing, query)]
        if not matches:
            logger.debug(f"No listing for {query}")
            return None
        return matches[self.rng.randrange(len(matches))]

    def _matches(self, listing: Listing, query: ListingQuery) -> bool:
        search_text = query.search_text.lower()
        keywords = [keyword.lower() for keyword in listing.keyword_list]
        if self._categories[listing.id] != search_text and search_text not in keywords:
            return False

        if query.keyword is not None:
            keyword = query.keyword.lower()
            if keyword not in keywords and keyword not in listing.name.lower():
                return False

        if query.color is not None:
            colors = [color.lower() for color in listing.color_list]
            if query.color.lower() not in colors:
                return False

        return True

    @staticmethod
    def _category_name(listing: Listing) -> str | None:
        category = classify_listing(listing)
        return category.name if category is not None else None
