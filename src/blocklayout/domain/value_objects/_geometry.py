"""Ground-plane geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Vector3:
    """World-space position in inches.

    The layout lives on the X/Z ground plane; ``y`` is vertical and only
    carried through (or rounded to the course module on grid fallback).
    """

    x: float
    y: float
    z: float

    def ground_distance(self, x: float, z: float) -> float:
        """Euclidean distance to (x, z) in the ground plane, ignoring y."""
        return ((self.x - x) ** 2 + (self.z - z) ** 2) ** 0.5


class FaceOrientation(str, Enum):
    """Cardinal direction a snap face points toward.

    Attributes:
        MIN_X: Face on the low-X side, facing -X.
        MAX_X: Face on the high-X side, facing +X.
        MIN_Z: Face on the low-Z side, facing -Z.
        MAX_Z: Face on the high-Z side, facing +Z.
    """

    MIN_X = "min_x"
    MAX_X = "max_x"
    MIN_Z = "min_z"
    MAX_Z = "max_z"

    @property
    def axis(self) -> str:
        """Axis the face normal lies on ("x" or "z")."""
        return "x" if self in (FaceOrientation.MIN_X, FaceOrientation.MAX_X) else "z"

    @property
    def opposite(self) -> FaceOrientation:
        """The orientation that can touch this one edge-to-edge."""
        return _OPPOSITES[self]


_OPPOSITES: dict[FaceOrientation, FaceOrientation] = {
    FaceOrientation.MIN_X: FaceOrientation.MAX_X,
    FaceOrientation.MAX_X: FaceOrientation.MIN_X,
    FaceOrientation.MIN_Z: FaceOrientation.MAX_Z,
    FaceOrientation.MAX_Z: FaceOrientation.MIN_Z,
}


@dataclass(frozen=True)
class BoundingRectangle:
    """Axis-aligned rectangle enclosing a block footprint.

    For corner blocks this encloses the L or triangle, so part of the
    rectangle is empty.

    Attributes:
        min_x: Low X edge in world coordinates.
        max_x: High X edge in world coordinates.
        min_z: Low Z edge in world coordinates.
        max_z: High Z edge in world coordinates.
        rotation: Rotation in degrees the rectangle was computed under.
    """

    min_x: float
    max_x: float
    min_z: float
    max_z: float
    rotation: int

    def __post_init__(self) -> None:
        if self.max_x < self.min_x:
            raise ValueError("max_x must be >= min_x")
        if self.max_z < self.min_z:
            raise ValueError("max_z must be >= min_z")

    @property
    def width(self) -> float:
        """Extent along X."""
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        """Extent along Z."""
        return self.max_z - self.min_z

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_z(self) -> float:
        return (self.min_z + self.max_z) / 2


@dataclass(frozen=True)
class SnapFace:
    """A snap face of a placed block in world coordinates.

    Attributes:
        center_x: X of the face midpoint.
        center_z: Z of the face midpoint.
        plane: Constant coordinate of the face plane (X for X faces, Z for Z faces).
        orientation: Direction the face points toward.
    """

    center_x: float
    center_z: float
    plane: float
    orientation: FaceOrientation


@dataclass(frozen=True)
class FaceOffset:
    """A snap face of a block that has not been positioned yet.

    Same layout as SnapFace, but every value is relative to the block's
    own center.
    """

    offset_x: float
    offset_z: float
    plane_offset: float
    orientation: FaceOrientation

    def translated(self, x: float, z: float) -> SnapFace:
        """Place this face on a block centered at (x, z)."""
        plane_origin = x if self.orientation.axis == "x" else z
        return SnapFace(
            center_x=x + self.offset_x,
            center_z=z + self.offset_z,
            plane=plane_origin + self.plane_offset,
            orientation=self.orientation,
        )
