"""Service protocols for dependency injection.

This module defines the contracts between the furnishing core and its
collaborators at the boundary. Infrastructure implementations satisfy these
protocols, so the core can be exercised with in-memory fakes in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furnishing.domain.value_objects import Listing, ListingQuery


@runtime_checkable
class ListingSearchProtocol(Protocol):
    """Protocol for best-effort catalog search.

    Implementations look up one listing matching a query. Finding nothing
    is a normal outcome and is signalled by returning ``None``, never by
    raising.

    Example:
        ```python
        class InMemoryListingCatalog:
            def find_one(self, query: ListingQuery) -> Listing | None:
                ...
        ```
    """

    def find_one(self, query: ListingQuery) -> Listing | None:
        """Find one listing for ``query``.

        Args:
            query: Search text with optional keyword and color filters.

        Returns:
            A matching listing, or None when nothing matches.
        """
        ...


@runtime_checkable
class ProgressSinkProtocol(Protocol):
    """Protocol for optional progress reporting.

    The furnisher hands over snapshots at milestones (room description,
    initial layout, periodic annealing progress, final layout). Sinks are
    best effort: exceptions they raise are logged and ignored by the caller.
    """

    def try_render(self, snapshot: Any, label: str) -> None:
        """Render or record one snapshot.

        Args:
            snapshot: The object being reported, e.g. a layout.
            label: Milestone name such as ``"final fitting layout"``.
        """
        ...
