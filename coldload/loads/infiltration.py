"""
Infiltration loads: air leaking into the closed room and air exchanged
through the door each time it opens.
"""

from dataclasses import dataclass

from coldload.loads.base import LoadCalculator, LoadCategory, LoadContext
from coldload.physics.thermal import calculate_air_change_load, kj_per_day_to_kw


@dataclass(frozen=True)
class InfiltrationLoad:
    """Infiltration loads in kW."""

    air_change: float
    door_opening: float
    air_changes_per_hour: float

    @property
    def total(self) -> float:
        return self.air_change + self.door_opening


class InfiltrationLoadCalculator(LoadCalculator):
    """Air change and door opening loads, computed independently."""

    def __init__(self) -> None:
        super().__init__("Infiltration", LoadCategory.INFILTRATION)

    def calculate(self, context: LoadContext) -> InfiltrationLoad:
        config = context.config
        air_change = calculate_air_change_load(
            context.geometry.volume,
            config.air_changes_per_hour,
            config.air_heat_content,
            context.temperature_difference,
        )

        door_opening = 0.0
        if context.door_openings > 0:
            # kJ per day from all openings, averaged over 24 hours
            door_kj = context.geometry.door_area * context.door_openings * config.door_opening_heat
            door_opening = kj_per_day_to_kw(door_kj)

        return InfiltrationLoad(
            air_change=air_change,
            door_opening=door_opening,
            air_changes_per_hour=config.air_changes_per_hour,
        )

    @classmethod
    def get_load_variables_metadata(cls):
        return {
            "air_change": {"label": "Air infiltration load", "unit": "kW"},
            "door_opening": {"label": "Door infiltration load", "unit": "kW"},
        }
