"""Domain entities for block layouts."""

from dataclasses import dataclass

from .value_objects import BlockType, Vector3


@dataclass(frozen=True)
class PlacedBlock:
    """A block already placed in the layout.

    Owned by the surrounding application; the resolver and snapper only
    read it.

    Attributes:
        id: Opaque, stable identifier.
        block_type: Catalog block type. Unknown strings are allowed and
            resolve to the fallback footprint.
        core_thickness: Concrete core thickness in inches.
        position: World position of the footprint's bounding-box center.
        rotation: Rotation about Y in degrees, one of 0/90/180/270.
    """

    id: str
    block_type: BlockType | str
    core_thickness: float
    position: Vector3
    rotation: int = 0
