"""Core records, configuration and constants for cold room load calculation."""

from coldload.core.config import (
    # Config dataclasses
    EngineConfig,
    DesignInputs,
    # Config utilities
    load_config,
    save_config,
    create_engine_config,
    create_design_inputs,
    get_default_inputs,
    get_default_config,
)
from coldload.core.constants import (
    # Conversions
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    WATTS_PER_KW,
    # Air properties
    AIR_HEAT_CONTENT_KJ_PER_M3K,
    DEFAULT_AIR_CHANGES_PER_HOUR,
    DOOR_OPENING_HEAT_KJ_PER_M2,
    # Internal gains
    PERSON_HEAT_KW,
    # Sizing
    SAFETY_FRACTION,
    NEUTRAL_STORAGE_FACTOR,
)
from coldload.core.diagnostics import Diagnostic, DiagnosticCode, coerce_float
from coldload.core.records import (
    RoomGeometry,
    Construction,
    AmbientConditions,
    ProductProfile,
    OperationalLoads,
)

__all__ = [
    # Config dataclasses
    "EngineConfig",
    "DesignInputs",
    # Config utilities
    "load_config",
    "save_config",
    "create_engine_config",
    "create_design_inputs",
    "get_default_inputs",
    "get_default_config",
    # Conversions
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "WATTS_PER_KW",
    # Air properties
    "AIR_HEAT_CONTENT_KJ_PER_M3K",
    "DEFAULT_AIR_CHANGES_PER_HOUR",
    "DOOR_OPENING_HEAT_KJ_PER_M2",
    # Internal gains
    "PERSON_HEAT_KW",
    # Sizing
    "SAFETY_FRACTION",
    "NEUTRAL_STORAGE_FACTOR",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCode",
    "coerce_float",
    # Input records
    "RoomGeometry",
    "Construction",
    "AmbientConditions",
    "ProductProfile",
    "OperationalLoads",
]
