"""Planar geometry value objects.

The floor plane uses ``x`` (width) and ``z`` (depth). Height is not modeled.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """Immutable point or direction in the floor plane."""

    x: float
    z: float

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.z + other.z)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.z - other.z)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.z)

    def scale(self, factor: float) -> Vector2D:
        """Return this vector multiplied by a scalar."""
        return Vector2D(self.x * factor, self.z * factor)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.z * other.z

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product, positive when ``other`` is counter-clockwise."""
        return self.x * other.z - self.z * other.x

    @property
    def length_squared(self) -> float:
        return self.x * self.x + self.z * self.z

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.z)

    def distance_to(self, other: Vector2D) -> float:
        return math.hypot(self.x - other.x, self.z - other.z)

    def normalized(self) -> Vector2D:
        """Return the unit vector in this direction.

        The zero vector has no direction and is returned unchanged.
        """
        length = self.length
        if length == 0.0:
            return ZERO_2D
        return Vector2D(self.x / length, self.z / length)

    def rotated(self, angle: float, center: Vector2D | None = None) -> Vector2D:
        """Rotate counter-clockwise by ``angle`` radians about ``center`` (origin by default)."""
        cx, cz = (center.x, center.z) if center is not None else (0.0, 0.0)
        sin = math.sin(angle)
        cos = math.cos(angle)
        dx = self.x - cx
        dz = self.z - cz
        return Vector2D(dx * cos - dz * sin + cx, dx * sin + dz * cos + cz)

    def is_close(self, other: Vector2D, tolerance: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.z - other.z) <= tolerance

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> Vector2D:
        """Vector of ``length`` pointing along ``angle`` radians from the x axis."""
        return cls(length * math.cos(angle), length * math.sin(angle))


ZERO_2D = Vector2D(0.0, 0.0)
UNIT_X = Vector2D(1.0, 0.0)
UNIT_Z = Vector2D(0.0, 1.0)


@dataclass(frozen=True)
class Polygon2D:
    """Closed polygon in the floor plane.

    Vertices are ordered clockwise; the last vertex connects back to the first.
    Inside/outside tests in the geometry services rely on that ordering.
    """

    vertices: tuple[Vector2D, ...]

    def __post_init__(self) -> None:
        if len(self.vertices) < 2:
            raise ValueError("A polygon needs at least two vertices")

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, index: int) -> Vector2D:
        return self.vertices[index % len(self.vertices)]

    def edges(self) -> list[tuple[Vector2D, Vector2D]]:
        """Return (start, end) pairs for every edge, including the closing edge."""
        count = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % count]) for i in range(count)]

    def translated(self, offset: Vector2D) -> Polygon2D:
        return Polygon2D(tuple(vertex + offset for vertex in self.vertices))

    def rotated(self, angle: float, center: Vector2D) -> Polygon2D:
        return Polygon2D(tuple(vertex.rotated(angle, center) for vertex in self.vertices))

    def is_close(self, other: Polygon2D, tolerance: float = 1e-9) -> bool:
        if len(self) != len(other):
            return False
        return all(a.is_close(b, tolerance) for a, b in zip(self.vertices, other.vertices))

    @classmethod
    def from_points(cls, points: list[tuple[float, float]]) -> Polygon2D:
        """Build a polygon from ``(x, z)`` pairs."""
        return cls(tuple(Vector2D(x, z) for x, z in points))


@dataclass(frozen=True)
class BoundingBox3D:
    """Furniture bounding box in meters."""

    width: float
    depth: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.height < 0:
            raise ValueError("Bounding box width and depth must be positive")

    @property
    def base_area(self) -> float:
        """Floor footprint (width x depth) in square meters."""
        return self.width * self.depth

    @property
    def half_diagonal(self) -> float:
        """Half of the footprint diagonal, the radius of the enclosing circle."""
        return math.sqrt(self.width * self.width + self.depth * self.depth) / 2

    @classmethod
    def from_centimeters(cls, width: float, depth: float, height: float) -> BoundingBox3D:
        return cls(width=width / 100, depth=depth / 100, height=height / 100)
