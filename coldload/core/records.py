"""
Input records consumed by the load engine.

Each record mirrors one step of the design workflow: room, construction,
conditions, product and usage. Fields are loosely typed because values
arriving from text entry may still be strings such as ``"4.0"`` or ``""``.
The engine coerces every field itself and never trusts the caller.

Defaults are the documented starting values used when no prior record
exists for a step.

Usage:
    from coldload.core.records import RoomGeometry, ProductProfile

    room = RoomGeometry(length="6", width=4, height=3)
    product = ProductProfile(product_type="Chicken", daily_load=500)
"""

from dataclasses import dataclass
from typing import Any

from coldload.core.constants import (
    DEFAULT_ROOM_LENGTH,
    DEFAULT_ROOM_WIDTH,
    DEFAULT_ROOM_HEIGHT,
    DEFAULT_DOOR_WIDTH,
    DEFAULT_DOOR_HEIGHT,
    DEFAULT_INSULATION_TYPE,
    DEFAULT_INSULATION_THICKNESS,
    DEFAULT_EXTERNAL_TEMP,
    DEFAULT_INTERNAL_TEMP,
    DEFAULT_OPERATING_HOURS,
    DEFAULT_PRODUCT_TYPE,
    DEFAULT_DAILY_LOAD,
    DEFAULT_INCOMING_TEMP,
    DEFAULT_OUTGOING_TEMP,
    DEFAULT_STORAGE_TYPE,
    DEFAULT_NUMBER_OF_PEOPLE,
    DEFAULT_WORKING_HOURS,
    DEFAULT_DOOR_OPENINGS,
    DEFAULT_LIGHTING_WATTAGE,
    DEFAULT_EQUIPMENT_LOAD,
)


@dataclass(frozen=True)
class RoomGeometry:
    """Inside dimensions of the room and its door, in meters."""

    length: Any = DEFAULT_ROOM_LENGTH
    width: Any = DEFAULT_ROOM_WIDTH
    height: Any = DEFAULT_ROOM_HEIGHT
    door_width: Any = DEFAULT_DOOR_WIDTH
    door_height: Any = DEFAULT_DOOR_HEIGHT


@dataclass(frozen=True)
class Construction:
    """Insulation of the wall, ceiling and floor panels."""

    insulation_type: Any = DEFAULT_INSULATION_TYPE
    insulation_thickness: Any = DEFAULT_INSULATION_THICKNESS  # mm


@dataclass(frozen=True)
class AmbientConditions:
    """Design temperatures on both sides of the envelope."""

    external_temp: Any = DEFAULT_EXTERNAL_TEMP  # °C
    internal_temp: Any = DEFAULT_INTERNAL_TEMP  # °C
    operating_hours: Any = DEFAULT_OPERATING_HOURS  # hrs/day


@dataclass(frozen=True)
class ProductProfile:
    """Product brought into the room each day."""

    product_type: Any = DEFAULT_PRODUCT_TYPE
    daily_load: Any = DEFAULT_DAILY_LOAD  # kg/day
    incoming_temp: Any = DEFAULT_INCOMING_TEMP  # °C
    outgoing_temp: Any = DEFAULT_OUTGOING_TEMP  # °C
    storage_type: Any = DEFAULT_STORAGE_TYPE


@dataclass(frozen=True)
class OperationalLoads:
    """People, door traffic, lights and equipment inside the room."""

    number_of_people: Any = DEFAULT_NUMBER_OF_PEOPLE
    working_hours: Any = DEFAULT_WORKING_HOURS  # hrs/day a person is inside
    door_openings: Any = DEFAULT_DOOR_OPENINGS  # per day
    lighting_wattage: Any = DEFAULT_LIGHTING_WATTAGE  # W
    equipment_load: Any = DEFAULT_EQUIPMENT_LOAD  # W
