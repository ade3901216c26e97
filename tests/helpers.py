"""Shared builders for load tests."""

from coldload.construction import evaluate_construction
from coldload.core.config import EngineConfig
from coldload.core.records import Construction, RoomGeometry
from coldload.geometry import calculate_geometry
from coldload.loads import LoadContext
from coldload.tables import DEFAULT_TABLES, ProductType


def make_context(**overrides):
    """Build a LoadContext for the default 4 x 3 x 2.5 m beef freezer."""
    values = dict(
        geometry=calculate_geometry(RoomGeometry()),
        construction=evaluate_construction(Construction()),
        external_temp=35.0,
        internal_temp=-18.0,
        operating_hours=24.0,
        product=DEFAULT_TABLES.lookup_product(ProductType.BEEF),
        daily_load=1000.0,
        incoming_temp=25.0,
        outgoing_temp=-18.0,
        number_of_people=2.0,
        working_hours=4.0,
        door_openings=15.0,
        lighting_wattage=150.0,
        equipment_load=300.0,
        config=EngineConfig(),
    )
    values.update(overrides)
    return LoadContext(**values)
