"""Heat gain through the insulated walls, ceiling and floor."""

from dataclasses import dataclass

from coldload.loads.base import LoadCalculator, LoadCategory, LoadContext
from coldload.physics.thermal import calculate_conduction_load


@dataclass(frozen=True)
class TransmissionLoad:
    """Transmission loads per envelope surface in kW."""

    walls: float
    ceiling: float
    floor: float

    @property
    def total(self) -> float:
        return self.walls + self.ceiling + self.floor


class TransmissionLoadCalculator(LoadCalculator):
    """
    Conduction through the envelope at the design temperature difference.

    A zero or negative temperature difference is passed through unchanged;
    a room colder outside than inside is an input problem, not an engine one.
    """

    def __init__(self) -> None:
        super().__init__("Transmission", LoadCategory.TRANSMISSION)

    def calculate(self, context: LoadContext) -> TransmissionLoad:
        u_factor = context.construction.u_factor
        delta_t = context.temperature_difference
        geometry = context.geometry
        return TransmissionLoad(
            walls=calculate_conduction_load(u_factor, geometry.wall_area, delta_t),
            ceiling=calculate_conduction_load(u_factor, geometry.ceiling_area, delta_t),
            floor=calculate_conduction_load(u_factor, geometry.floor_area, delta_t),
        )

    @classmethod
    def get_load_variables_metadata(cls):
        return {
            "walls": {"label": "Walls", "unit": "kW", "area": "wall_area"},
            "ceiling": {"label": "Ceiling", "unit": "kW", "area": "ceiling_area"},
            "floor": {"label": "Floor", "unit": "kW", "area": "floor_area"},
        }
