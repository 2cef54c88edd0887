"""Vector, box and dimension value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3D:
    """A point or displacement in inches (x right, y up, z front to back)."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Vector3D:
        return cls(0.0, 0.0, 0.0)

    def add(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vector3D:
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __add__(self, other: Vector3D) -> Vector3D:
        return self.add(other)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return self.subtract(other)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3D:
        """Return the unit vector; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return Vector3D(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def max_component(self) -> float:
        return max(self.x, self.y, self.z)

    def min_component(self) -> float:
        return min(self.x, self.y, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def format(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


@dataclass(frozen=True)
class Position3D:
    """Offset of a part or node from its parent's local origin, in inches.

    Positions are always relative to the immediate parent and never world
    coordinates; world placement is derived by walking the scene graph.
    """

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Position3D:
        return cls(0.0, 0.0, 0.0)

    def to_vector(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def translate(self, dx: float, dy: float, dz: float) -> Position3D:
        return Position3D(self.x + dx, self.y + dy, self.z + dz)

    @property
    def is_non_negative(self) -> bool:
        return self.x >= 0 and self.y >= 0 and self.z >= 0


@dataclass(frozen=True)
class Dimensions3D:
    """Width (x), height (y) and depth (z) in inches.

    Zero components are allowed (the root of an empty scene, a flat marker);
    negative components are not.
    """

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.depth < 0:
            raise ValueError(
                "Dimensions cannot be negative "
                f"(got {self.width:.4f} x {self.height:.4f} x {self.depth:.4f})"
            )

    @classmethod
    def zero(cls) -> Dimensions3D:
        return cls(0.0, 0.0, 0.0)

    @property
    def has_geometry(self) -> bool:
        """True when at least one component is strictly positive."""
        return self.width > 0 or self.height > 0 or self.depth > 0

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def to_vector(self) -> Vector3D:
        return Vector3D(self.width, self.height, self.depth)


@dataclass(frozen=True)
class Box3D:
    """Axis-aligned box stored as an origin (minimum corner) and a size."""

    origin: Vector3D
    size: Vector3D

    @classmethod
    def at_origin(cls, width: float, height: float, depth: float) -> Box3D:
        return cls(Vector3D.origin(), Vector3D(width, height, depth))

    @classmethod
    def of(
        cls, x: float, y: float, z: float, width: float, height: float, depth: float
    ) -> Box3D:
        return cls(Vector3D(x, y, z), Vector3D(width, height, depth))

    @classmethod
    def from_min_max(cls, minimum: Vector3D, maximum: Vector3D) -> Box3D:
        """Build a box from its two extreme corners."""
        return cls(minimum, maximum.subtract(minimum))

    @classmethod
    def from_placement(cls, position: Position3D, dimensions: Dimensions3D) -> Box3D:
        return cls(position.to_vector(), dimensions.to_vector())

    @property
    def min(self) -> Vector3D:
        return self.origin

    @property
    def max(self) -> Vector3D:
        return self.origin.add(self.size)

    @property
    def center(self) -> Vector3D:
        return self.origin.add(self.size.scale(0.5))

    @property
    def width(self) -> float:
        return self.size.x

    @property
    def height(self) -> float:
        return self.size.y

    @property
    def depth(self) -> float:
        return self.size.z

    @property
    def is_empty(self) -> bool:
        """True when the box has no positive extent on any axis."""
        return self.size.x <= 0 and self.size.y <= 0 and self.size.z <= 0

    def translate(self, offset: Vector3D) -> Box3D:
        return Box3D(self.origin.add(offset), self.size)

    def contains(self, point: Vector3D) -> bool:
        lo, hi = self.min, self.max
        return (
            lo.x <= point.x <= hi.x
            and lo.y <= point.y <= hi.y
            and lo.z <= point.z <= hi.z
        )

    def intersects(self, other: Box3D) -> bool:
        a_lo, a_hi = self.min, self.max
        b_lo, b_hi = other.min, other.max
        return (
            a_lo.x <= b_hi.x
            and a_hi.x >= b_lo.x
            and a_lo.y <= b_hi.y
            and a_hi.y >= b_lo.y
            and a_lo.z <= b_hi.z
            and a_hi.z >= b_lo.z
        )

    def union(self, other: Box3D) -> Box3D:
        """Smallest box enclosing both boxes.

        An empty box is the identity: it never enlarges the other operand,
        wherever its origin happens to sit.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other

        a_hi, b_hi = self.max, other.max
        lo = Vector3D(
            min(self.origin.x, other.origin.x),
            min(self.origin.y, other.origin.y),
            min(self.origin.z, other.origin.z),
        )
        hi = Vector3D(
            max(a_hi.x, b_hi.x),
            max(a_hi.y, b_hi.y),
            max(a_hi.z, b_hi.z),
        )
        return Box3D.from_min_max(lo, hi)

    def format(self) -> str:
        return f"Box3D[pos={self.origin.format()}, size={self.size.format()}]"
