"""Infrastructure layer - catalog access, progress reporting and formatters."""

from .formatters import LayoutSummaryFormatter, RoomConfigurationJsonExporter
from .listing_catalog import InMemoryListingCatalog
from .progress import LoggingProgressSink, RecordingProgressSink, describe_snapshot

__all__ = [
    "InMemoryListingCatalog",
    "LayoutSummaryFormatter",
    "LoggingProgressSink",
    "RecordingProgressSink",
    "RoomConfigurationJsonExporter",
    "describe_snapshot",
]
