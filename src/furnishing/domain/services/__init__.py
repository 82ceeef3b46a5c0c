"""Domain services for room furnishing.

This package provides the two phases of a furnishing run:
- Weighted fitting model selection against a room's priorities
- Simulated annealing of the selected fittings' placement
"""

from .furnisher import (
    AnnealingProgress,
    FurnishingResult,
    RoomFurnisher,
    acceptance_probability,
)
from .priority import REFERENCE_AREA, FittingModelSelector, importance

__all__ = [
    "AnnealingProgress",
    "FittingModelSelector",
    "FurnishingResult",
    "REFERENCE_AREA",
    "RoomFurnisher",
    "acceptance_probability",
    "importance",
]
