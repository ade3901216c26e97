"""Heat released inside the room by people, lights and equipment."""

from dataclasses import dataclass

from coldload.core.constants import HOURS_PER_DAY
from coldload.loads.base import LoadCalculator, LoadCategory, LoadContext
from coldload.physics.thermal import watts_to_kw


@dataclass(frozen=True)
class InternalLoad:
    """Internal loads in kW."""

    people: float
    lighting: float
    equipment: float

    @property
    def total(self) -> float:
        return self.people + self.lighting + self.equipment


class InternalLoadCalculator(LoadCalculator):
    """
    Occupancy, lighting and equipment gains.

    People release a fixed heat per person, scaled by the fraction of the
    day they spend in the room. Lighting and equipment count at full rating.
    """

    def __init__(self) -> None:
        super().__init__("Internal", LoadCategory.INTERNAL)

    def calculate(self, context: LoadContext) -> InternalLoad:
        occupied_fraction = context.working_hours / HOURS_PER_DAY
        return InternalLoad(
            people=context.number_of_people * context.config.person_heat_kw * occupied_fraction,
            lighting=watts_to_kw(context.lighting_wattage),
            equipment=watts_to_kw(context.equipment_load),
        )

    @classmethod
    def get_load_variables_metadata(cls):
        return {
            "people": {"label": "Occupancy load", "unit": "kW"},
            "lighting": {"label": "Lighting load", "unit": "kW"},
            "equipment": {"label": "Equipment/Fan load", "unit": "kW"},
        }
