"""
Cooling load engine for a single cold storage room.

The engine is a pure function of its input records: it performs no I/O,
keeps no state between calls and never raises for bad input values. Each
call coerces the raw records, derives geometry and envelope performance,
runs the four load calculators and aggregates them into one immutable
:class:`LoadBreakdown`.

Usage:
    from coldload.engine import evaluate
    from coldload.core.records import (
        RoomGeometry, Construction, AmbientConditions, ProductProfile, OperationalLoads,
    )

    result = evaluate(
        RoomGeometry(), Construction(), AmbientConditions(),
        ProductProfile(), OperationalLoads(),
    )
    print(f"{result.total_load_with_safety:.2f} kW")
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from coldload.aggregator import LoadAggregator, StorageCapacity
from coldload.construction import ConstructionResult, evaluate_construction
from coldload.core.config import DesignInputs, EngineConfig
from coldload.core.constants import HOURS_PER_DAY
from coldload.core.diagnostics import Diagnostic, as_label, coerce_float
from coldload.core.records import (
    RoomGeometry,
    Construction,
    AmbientConditions,
    ProductProfile,
    OperationalLoads,
)
from coldload.geometry import GeometryResult, calculate_geometry
from coldload.loads.base import LoadContext
from coldload.loads.infiltration import InfiltrationLoadCalculator
from coldload.loads.internal import InternalLoad, InternalLoadCalculator
from coldload.loads.product import ProductLoad, ProductLoadCalculator, resolve_product
from coldload.loads.transmission import TransmissionLoad, TransmissionLoadCalculator
from coldload.tables import DEFAULT_TABLES, ThermalPropertyTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductInfo:
    """Echo of the product inputs as used by the engine."""

    product_type: str
    mass: float  # kg/day
    incoming_temp: float  # °C
    outgoing_temp: float  # °C


@dataclass(frozen=True)
class AmbientSummary:
    external_temp: float
    internal_temp: float
    operating_hours: float


@dataclass(frozen=True)
class OperationsSummary:
    number_of_people: float
    working_hours: float
    door_openings: float
    lighting_wattage: float
    equipment_load: float


@dataclass(frozen=True)
class LoadBreakdown:
    """
    Itemized result of one evaluation. All loads are in kW.

    ``pull_down_time_estimate`` is an approximate metric (hours), not a
    simulated value. ``diagnostics`` lists every placeholder substitution the
    engine made; an empty tuple means every input was used as given.
    """

    geometry: GeometryResult
    temperature_difference: float
    construction: ConstructionResult
    transmission_load: TransmissionLoad
    product_load: ProductLoad
    air_infiltration_load: float
    door_load: float
    air_change_rate: float  # changes/hr
    internal_loads: InternalLoad
    total_load: float
    safety_margin: float
    total_load_with_safety: float
    storage_capacity: StorageCapacity
    pull_down_time_estimate: float  # hours
    product_info: ProductInfo
    ambient: AmbientSummary
    operations: OperationsSummary
    tables_version: str
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def volume(self) -> float:
        return self.geometry.volume

    @property
    def is_degraded(self) -> bool:
        """True when any value was substituted during evaluation."""
        return bool(self.diagnostics)

    @property
    def daily_energy_kwh(self) -> float:
        """Energy use if the sized capacity runs around the clock."""
        return self.total_load_with_safety * HOURS_PER_DAY

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serializable representation of the result."""
        geometry = self.geometry
        construction = self.construction
        storage = self.storage_capacity
        return {
            "dimensions": {
                "length": geometry.length,
                "width": geometry.width,
                "height": geometry.height,
            },
            "door_dimensions": {"width": geometry.door_width, "height": geometry.door_height},
            "areas": {
                "wall": geometry.wall_area,
                "ceiling": geometry.ceiling_area,
                "floor": geometry.floor_area,
                "door": geometry.door_area,
            },
            "volume": geometry.volume,
            "temperature_difference": self.temperature_difference,
            "construction": {
                "type": construction.type_label,
                "thickness": construction.thickness_mm,
                "u_factor": construction.u_factor,
                "r_value": construction.r_value,
            },
            "transmission_load": {
                "walls": self.transmission_load.walls,
                "ceiling": self.transmission_load.ceiling,
                "floor": self.transmission_load.floor,
                "total": self.transmission_load.total,
            },
            "product_load": {
                "sensible_above": self.product_load.sensible_above,
                "latent": self.product_load.latent,
                "sensible_below": self.product_load.sensible_below,
                "total": self.product_load.total,
            },
            "air_infiltration_load": self.air_infiltration_load,
            "air_change_rate": self.air_change_rate,
            "door_load": self.door_load,
            "door_openings": self.operations.door_openings,
            "internal_loads": {
                "people": self.internal_loads.people,
                "lighting": self.internal_loads.lighting,
                "equipment": self.internal_loads.equipment,
                "total": self.internal_loads.total,
            },
            "working_hours": self.operations.working_hours,
            "total_load": self.total_load,
            "safety_margin": self.safety_margin,
            "total_load_with_safety": self.total_load_with_safety,
            "daily_energy_kwh": self.daily_energy_kwh,
            "storage_capacity": {
                "storage_type": storage.storage_type,
                "storage_factor": storage.storage_factor,
                "maximum": storage.maximum,
                "utilization": storage.utilization,
            },
            "pull_down_time_estimate": self.pull_down_time_estimate,
            "product_info": {
                "type": self.product_info.product_type,
                "mass": self.product_info.mass,
                "incoming_temp": self.product_info.incoming_temp,
                "outgoing_temp": self.product_info.outgoing_temp,
            },
            "ambient": {
                "external_temp": self.ambient.external_temp,
                "internal_temp": self.ambient.internal_temp,
                "operating_hours": self.ambient.operating_hours,
            },
            "tables_version": self.tables_version,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


class LoadEngine:
    """
    Evaluates cold room designs against one set of tables and parameters.

    The engine holds only read-only configuration, so one instance can be
    shared and called concurrently.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        tables: Optional[ThermalPropertyTables] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.tables = tables or DEFAULT_TABLES
        self.transmission = TransmissionLoadCalculator()
        self.product = ProductLoadCalculator()
        self.infiltration = InfiltrationLoadCalculator()
        self.internal = InternalLoadCalculator()
        self.aggregator = LoadAggregator(self.config, self.tables)

    @classmethod
    def from_config(
        cls, config: EngineConfig, tables: Optional[ThermalPropertyTables] = None
    ) -> "LoadEngine":
        """
        Create a LoadEngine from an EngineConfig dataclass.

        Args:
            config: EngineConfig instance with engine parameters
            tables: Optional reference tables (defaults to the built-in ones)

        Returns:
            Configured LoadEngine instance
        """
        if not isinstance(config, EngineConfig):
            raise TypeError(f"Expected EngineConfig, got {type(config).__name__}")
        return cls(config=config, tables=tables)

    def evaluate(
        self,
        room: RoomGeometry,
        construction: Construction,
        ambient: AmbientConditions,
        product: ProductProfile,
        operations: OperationalLoads,
    ) -> LoadBreakdown:
        """
        Calculate the full cooling load breakdown for one room.

        Args:
            room: Room and door dimensions
            construction: Insulation type and thickness
            ambient: External/internal design temperatures and operating hours
            product: Stored product, daily intake and storage arrangement
            operations: People, door openings, lighting and equipment

        Returns:
            LoadBreakdown; never raises for malformed values or unknown keys
        """
        diagnostics: List[Diagnostic] = []

        geometry = calculate_geometry(room, diagnostics)
        construction_result = evaluate_construction(construction, self.tables, diagnostics)
        product_type, properties = resolve_product(product.product_type, self.tables, diagnostics)

        context = LoadContext(
            geometry=geometry,
            construction=construction_result,
            external_temp=coerce_float(ambient.external_temp, "ambient.external_temp", diagnostics),
            internal_temp=coerce_float(ambient.internal_temp, "ambient.internal_temp", diagnostics),
            operating_hours=coerce_float(
                ambient.operating_hours, "ambient.operating_hours", diagnostics, minimum=0.0
            ),
            product=properties,
            daily_load=coerce_float(
                product.daily_load, "product.daily_load", diagnostics, minimum=0.0
            ),
            incoming_temp=coerce_float(product.incoming_temp, "product.incoming_temp", diagnostics),
            outgoing_temp=coerce_float(product.outgoing_temp, "product.outgoing_temp", diagnostics),
            number_of_people=coerce_float(
                operations.number_of_people, "operations.number_of_people", diagnostics, minimum=0.0
            ),
            working_hours=coerce_float(
                operations.working_hours, "operations.working_hours", diagnostics, minimum=0.0
            ),
            door_openings=coerce_float(
                operations.door_openings, "operations.door_openings", diagnostics, minimum=0.0
            ),
            lighting_wattage=coerce_float(
                operations.lighting_wattage, "operations.lighting_wattage", diagnostics, minimum=0.0
            ),
            equipment_load=coerce_float(
                operations.equipment_load, "operations.equipment_load", diagnostics, minimum=0.0
            ),
            config=self.config,
        )

        transmission = self.transmission.calculate(context)
        product_load = self.product.calculate(context)
        infiltration = self.infiltration.calculate(context)
        internal = self.internal.calculate(context)

        totals = self.aggregator.combine(transmission, product_load, infiltration, internal)
        storage = self.aggregator.storage_capacity(context, product.storage_type, diagnostics)
        pull_down = self.aggregator.pull_down_time(context, totals, diagnostics)

        logger.debug(
            "Evaluated room %.1f m³: total %.3f kW, with safety %.3f kW (%d diagnostics)",
            geometry.volume,
            totals.total_load,
            totals.total_load_with_safety,
            len(diagnostics),
        )

        return LoadBreakdown(
            geometry=geometry,
            temperature_difference=context.temperature_difference,
            construction=construction_result,
            transmission_load=transmission,
            product_load=product_load,
            air_infiltration_load=infiltration.air_change,
            door_load=infiltration.door_opening,
            air_change_rate=infiltration.air_changes_per_hour,
            internal_loads=internal,
            total_load=totals.total_load,
            safety_margin=totals.safety_margin,
            total_load_with_safety=totals.total_load_with_safety,
            storage_capacity=storage,
            pull_down_time_estimate=pull_down,
            product_info=ProductInfo(
                product_type=product_type.value if product_type else as_label(product.product_type),
                mass=context.daily_load,
                incoming_temp=context.incoming_temp,
                outgoing_temp=context.outgoing_temp,
            ),
            ambient=AmbientSummary(
                external_temp=context.external_temp,
                internal_temp=context.internal_temp,
                operating_hours=context.operating_hours,
            ),
            operations=OperationsSummary(
                number_of_people=context.number_of_people,
                working_hours=context.working_hours,
                door_openings=context.door_openings,
                lighting_wattage=context.lighting_wattage,
                equipment_load=context.equipment_load,
            ),
            tables_version=self.tables.version,
            diagnostics=tuple(diagnostics),
        )

    def evaluate_inputs(self, inputs: DesignInputs) -> LoadBreakdown:
        """Evaluate a DesignInputs bundle."""
        return self.evaluate(
            inputs.room, inputs.construction, inputs.ambient, inputs.product, inputs.operations
        )


_DEFAULT_ENGINE = LoadEngine()


def evaluate(
    room: RoomGeometry,
    construction: Construction,
    ambient: AmbientConditions,
    product: ProductProfile,
    operations: OperationalLoads,
    *,
    tables: Optional[ThermalPropertyTables] = None,
    config: Optional[EngineConfig] = None,
) -> LoadBreakdown:
    """
    Calculate the cooling load breakdown for one room.

    Uses the built-in tables and default parameters unless overridden.
    """
    engine = _DEFAULT_ENGINE
    if tables is not None or config is not None:
        engine = LoadEngine(config=config, tables=tables)
    return engine.evaluate(room, construction, ambient, product, operations)
