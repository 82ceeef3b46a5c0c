"""Progress sinks for furnishing runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from furnishing.domain import FittingLayout, RoomDescription
from furnishing.domain.services import AnnealingProgress

logger = logging.getLogger(__name__)


def describe_snapshot(snapshot: Any) -> str:
    """One-line description of a progress snapshot."""
    if isinstance(snapshot, FittingLayout):
        return f"{len(snapshot)} fittings, cost {snapshot.get_cost():.4f}"
    if isinstance(snapshot, AnnealingProgress):
        return (
            f"iteration {snapshot.iteration}, temperature {snapshot.temperature:.6f}, "
            f"current {snapshot.current_cost:.4f}, best {snapshot.best_cost:.4f}"
        )
    if isinstance(snapshot, RoomDescription):
        return (
            f"{snapshot.room_category.value} {snapshot.width_in_meters:.2f}m x "
            f"{snapshot.depth_in_meters:.2f}m"
        )
    return repr(snapshot)


class LoggingProgressSink:
    """Writes every snapshot to the log.

    Attributes:
        level: Logging level used for snapshots.
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def try_render(self, snapshot: Any, label: str) -> None:
        logger.log(self.level, f"{label}: {describe_snapshot(snapshot)}")


@dataclass
class RecordingProgressSink:
    """Keeps every snapshot in memory, in arrival order."""

    records: list[tuple[str, Any]] = field(default_factory=list)

    def try_render(self, snapshot: Any, label: str) -> None:
        self.records.append((label, snapshot))

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.records]
