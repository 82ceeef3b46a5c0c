"""Room configuration: the flat, strategy-independent output format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RoomObject:
    """One placed object with absolute floor coordinates in meters."""

    id: str
    model_id: str
    name: str
    category: str
    x: float
    y: float
    z: float
    orientation_degrees: float
    colors: tuple[str, ...] = ()
    model_location: str = "catalog"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "model_id": self.model_id,
            "model_location": self.model_location,
            "name": self.name,
            "category": self.category,
            "colors": list(self.colors),
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "orientation_degrees": self.orientation_degrees,
        }


@dataclass(frozen=True)
class RoomConfiguration:
    """A furnished room as consumed by renderers and storage."""

    id: str
    area_size_x: float
    area_size_z: float
    objects: tuple[RoomObject, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "area_size_x": self.area_size_x,
            "area_size_z": self.area_size_z,
            "objects": [room_object.to_dict() for room_object in self.objects],
        }
