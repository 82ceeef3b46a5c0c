"""Contracts between the furnishing core and its collaborators."""

from .protocols import ListingSearchProtocol, ProgressSinkProtocol

__all__ = [
    "ListingSearchProtocol",
    "ProgressSinkProtocol",
]
