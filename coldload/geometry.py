"""
Room geometry derived from the raw dimension inputs.

Every dimension is coerced to a float and clamped at zero before any
multiplication, so a missing, unparsable or negative dimension yields zero
for each area and volume that depends on it. Negative areas are never
produced.
"""

from dataclasses import dataclass
from typing import List, Optional

from coldload.core.diagnostics import Diagnostic, coerce_float
from coldload.core.records import RoomGeometry


@dataclass(frozen=True)
class GeometryResult:
    """Coerced dimensions (m) and derived areas (m²) and volume (m³)."""

    length: float
    width: float
    height: float
    door_width: float
    door_height: float

    @property
    def wall_area(self) -> float:
        return 2 * (self.length + self.width) * self.height

    @property
    def ceiling_area(self) -> float:
        return self.length * self.width

    @property
    def floor_area(self) -> float:
        return self.length * self.width

    @property
    def door_area(self) -> float:
        return self.door_width * self.door_height

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


def calculate_geometry(
    room: RoomGeometry, diagnostics: Optional[List[Diagnostic]] = None
) -> GeometryResult:
    """
    Coerce room dimensions and derive areas and volume.

    Args:
        room: Raw room geometry record
        diagnostics: Optional list that receives coercion diagnostics

    Returns:
        GeometryResult with all values >= 0
    """
    if diagnostics is None:
        diagnostics = []
    return GeometryResult(
        length=coerce_float(room.length, "room.length", diagnostics, minimum=0.0),
        width=coerce_float(room.width, "room.width", diagnostics, minimum=0.0),
        height=coerce_float(room.height, "room.height", diagnostics, minimum=0.0),
        door_width=coerce_float(room.door_width, "room.door_width", diagnostics, minimum=0.0),
        door_height=coerce_float(room.door_height, "room.door_height", diagnostics, minimum=0.0),
    )
