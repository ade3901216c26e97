"""
Combination of the component loads into the required refrigeration capacity.

Besides the totals, two derived metrics are produced:

- storage capacity: how much product the room can hold and what share of it
  the daily intake uses
- pull-down time: a rough estimate of the hours needed to take the daily
  intake from incoming to outgoing temperature at the sized capacity

Zero denominators give 0.0 together with a diagnostic, never a division
error.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from coldload.core.config import EngineConfig
from coldload.core.constants import SAFETY_FRACTION, SECONDS_PER_HOUR
from coldload.core.diagnostics import Diagnostic, DiagnosticCode, as_label, short_repr
from coldload.loads.base import LoadContext
from coldload.loads.infiltration import InfiltrationLoad
from coldload.loads.internal import InternalLoad
from coldload.loads.product import ProductLoad
from coldload.loads.transmission import TransmissionLoad
from coldload.tables import DEFAULT_TABLES, StorageType, ThermalPropertyTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageCapacity:
    """Room storage capacity for the selected product and stacking."""

    storage_type: str
    storage_factor: float
    maximum: float  # kg
    utilization: float  # percent of maximum used by the daily load


@dataclass(frozen=True)
class LoadTotals:
    """Summed load and the capacity to install."""

    total_load: float  # kW
    safety_margin: float  # kW
    total_load_with_safety: float  # kW


class LoadAggregator:
    """Sums component loads and derives capacity metrics."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        tables: ThermalPropertyTables = DEFAULT_TABLES,
    ) -> None:
        self.config = config or EngineConfig()
        self.tables = tables

    def combine(
        self,
        transmission: TransmissionLoad,
        product: ProductLoad,
        infiltration: InfiltrationLoad,
        internal: InternalLoad,
    ) -> LoadTotals:
        """Add the component totals and apply the fixed 10% safety margin."""
        total_load = (
            transmission.total
            + product.total
            + infiltration.air_change
            + infiltration.door_opening
            + internal.total
        )
        return LoadTotals(
            total_load=total_load,
            safety_margin=total_load * SAFETY_FRACTION,
            total_load_with_safety=total_load * (1 + SAFETY_FRACTION),
        )

    def storage_capacity(
        self, context: LoadContext, storage_type, diagnostics: List[Diagnostic]
    ) -> StorageCapacity:
        """
        Maximum product mass the room holds and the daily load's share of it.

        maximum = volume × density × storage efficiency × storage factor
        """
        parsed = StorageType.parse(storage_type)
        factor = self.tables.lookup_storage_factor(parsed)
        if factor is None:
            logger.warning(
                "Unknown storage type %s, using neutral factor", short_repr(storage_type)
            )
            diagnostics.append(
                Diagnostic(
                    DiagnosticCode.UNKNOWN_STORAGE_TYPE,
                    "product.storage_type",
                    f"No storage factor for {short_repr(storage_type)}; "
                    f"using {self.config.neutral_storage_factor:g}",
                )
            )
            factor = self.config.neutral_storage_factor

        maximum = (
            context.geometry.volume
            * context.product.density
            * context.product.storage_efficiency
            * factor
        )
        if maximum > 0:
            utilization = context.daily_load / maximum * 100
        else:
            diagnostics.append(
                Diagnostic(
                    DiagnosticCode.ZERO_STORAGE_CAPACITY,
                    "storage_capacity.utilization",
                    "Maximum storage capacity is 0; utilization reported as 0%",
                )
            )
            utilization = 0.0

        return StorageCapacity(
            storage_type=parsed.value if parsed is not None else as_label(storage_type),
            storage_factor=factor,
            maximum=maximum,
            utilization=utilization,
        )

    def pull_down_time(
        self, context: LoadContext, totals: LoadTotals, diagnostics: List[Diagnostic]
    ) -> float:
        """
        Estimated hours to bring the daily load to its outgoing temperature.

        Divides the total heat to remove from the product (kJ) by the sized
        capacity (kW) and converts seconds to hours. This is an estimate: it
        assumes the whole capacity is available to the product.
        """
        capacity = totals.total_load_with_safety
        if capacity < 0:
            # net heat gain, e.g. a room warmer than its surroundings
            diagnostics.append(
                Diagnostic(
                    DiagnosticCode.NEGATIVE_COOLING_LOAD,
                    "pull_down_time_estimate",
                    f"Total cooling capacity is negative ({capacity:.3f} kW); "
                    "pull-down time reported as 0 h",
                )
            )
            return 0.0
        if capacity == 0:
            diagnostics.append(
                Diagnostic(
                    DiagnosticCode.ZERO_COOLING_LOAD,
                    "pull_down_time_estimate",
                    "Total cooling capacity is 0; pull-down time reported as 0 h",
                )
            )
            return 0.0
        energy_kj = (
            context.product.energy_per_kg(context.incoming_temp, context.outgoing_temp)
            * context.daily_load
        )
        return energy_kj / (totals.total_load_with_safety * SECONDS_PER_HOUR)
