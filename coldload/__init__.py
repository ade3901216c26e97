"""Cooling load estimation for cold storage rooms."""

from coldload.core.config import DesignInputs, EngineConfig
from coldload.core.records import (
    RoomGeometry,
    Construction,
    AmbientConditions,
    ProductProfile,
    OperationalLoads,
)
from coldload.engine import LoadBreakdown, LoadEngine, evaluate
from coldload.tables import (
    DEFAULT_TABLES,
    InsulationType,
    ProductType,
    StorageType,
    ThermalPropertyTables,
)

__version__ = "0.1.0"

__all__ = [
    "DesignInputs",
    "EngineConfig",
    "RoomGeometry",
    "Construction",
    "AmbientConditions",
    "ProductProfile",
    "OperationalLoads",
    "LoadBreakdown",
    "LoadEngine",
    "evaluate",
    "DEFAULT_TABLES",
    "InsulationType",
    "ProductType",
    "StorageType",
    "ThermalPropertyTables",
]
