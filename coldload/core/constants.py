"""
Physical and engineering constants for cold room load calculation.

This module centralizes all magic numbers and physical constants used by the
load engine. Values are SI (m, °C, kJ, kW) unless otherwise noted.

Usage:
    from coldload.core.constants import SECONDS_PER_DAY, WATTS_PER_KW

    load_kw = energy_kj_per_day / SECONDS_PER_DAY
    lighting_kw = lighting_w / WATTS_PER_KW
"""

# =============================================================================
# Time and Unit Conversions
# =============================================================================

SECONDS_PER_HOUR: float = 3600.0
HOURS_PER_DAY: float = 24.0
SECONDS_PER_DAY: float = SECONDS_PER_HOUR * HOURS_PER_DAY  # 86,400 s
WATTS_PER_KW: float = 1000.0
BTU_PER_HR_PER_KW: float = 3412.142

# =============================================================================
# Air Properties
# =============================================================================

# Volumetric heat content of room air near 0°C: ρ·cp ≈ 1.29 kg/m³ × 1.005 kJ/(kg·K)
AIR_HEAT_CONTENT_KJ_PER_M3K: float = 1.3  # kJ/(m³·K)

# Infiltration through panel joints, cable ducts and the closed door of a
# prefabricated cold room
DEFAULT_AIR_CHANGES_PER_HOUR: float = 0.5  # changes/hr

# Warm moist air entering per m² of door opening, per opening (sensible + latent)
DOOR_OPENING_HEAT_KJ_PER_M2: float = 900.0  # kJ/(m²·opening)

# =============================================================================
# Internal Gains
# =============================================================================

PERSON_HEAT_KW: float = 0.407  # kW per person working in a freezer room

# =============================================================================
# Sizing
# =============================================================================

SAFETY_FRACTION: float = 0.10  # 10% oversizing of the calculated load
NEUTRAL_STORAGE_FACTOR: float = 1.0  # packing factor when storage type is unknown

# =============================================================================
# Input Limits
# =============================================================================

# Largest magnitude accepted for any numeric input; keeps every product of
# inputs finite
MAX_INPUT_MAGNITUDE: float = 1e9

# =============================================================================
# Design Defaults (used when no prior input record exists)
# =============================================================================

DEFAULT_ROOM_LENGTH: float = 4.0  # m
DEFAULT_ROOM_WIDTH: float = 3.0  # m
DEFAULT_ROOM_HEIGHT: float = 2.5  # m
DEFAULT_DOOR_WIDTH: float = 1.0  # m
DEFAULT_DOOR_HEIGHT: float = 2.0  # m

DEFAULT_INSULATION_TYPE: str = "PUF"
DEFAULT_INSULATION_THICKNESS: int = 150  # mm

DEFAULT_EXTERNAL_TEMP: float = 35.0  # °C
DEFAULT_INTERNAL_TEMP: float = -18.0  # °C
DEFAULT_OPERATING_HOURS: float = 24.0  # hrs/day

DEFAULT_PRODUCT_TYPE: str = "Beef"
DEFAULT_DAILY_LOAD: float = 1000.0  # kg/day
DEFAULT_INCOMING_TEMP: float = 25.0  # °C
DEFAULT_OUTGOING_TEMP: float = -18.0  # °C
DEFAULT_STORAGE_TYPE: str = "Boxed"

DEFAULT_NUMBER_OF_PEOPLE: int = 2
DEFAULT_WORKING_HOURS: float = 4.0  # hrs/day
DEFAULT_DOOR_OPENINGS: int = 15  # per day
DEFAULT_LIGHTING_WATTAGE: float = 150.0  # W
DEFAULT_EQUIPMENT_LOAD: float = 300.0  # W

# =============================================================================
# Refrigeration Capacity
# =============================================================================

KW_PER_TON: float = 3.517  # kW per ton of refrigeration
