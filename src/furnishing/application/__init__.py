"""Application layer - use cases and orchestration."""

from .catalog import generate_fitting_semantics
from .commands import FurnishRoomCommand
from .dtos import FurnishRoomOutput, FurnitureSelectionType, RoomCreationRequest

__all__ = [
    "FurnishRoomCommand",
    "FurnishRoomOutput",
    "FurnitureSelectionType",
    "RoomCreationRequest",
    "generate_fitting_semantics",
]
