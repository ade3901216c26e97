"""
Abstract base class for all heat load calculators.

This module defines the common interface that every load component
implements. It provides a consistent API for:
- Calculating a load from the shared evaluation context (calculate)
- Describing the sub-loads it reports (get_load_variables_metadata)
- String representation

Calculators hold no state between calls. All inputs arrive through a
:class:`LoadContext`, already coerced and resolved by the engine.

Usage:
    from coldload.loads.base import LoadCalculator, LoadCategory

    class MyLoad(LoadCalculator):
        def __init__(self):
            super().__init__("My load", LoadCategory.OTHER)

        def calculate(self, context):
            return MyLoadResult(...)

        @classmethod
        def get_load_variables_metadata(cls):
            return {"value": {"label": "Value", "unit": "kW"}}
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict

from coldload.core.config import EngineConfig
from coldload.construction import ConstructionResult
from coldload.geometry import GeometryResult
from coldload.tables import ProductProperties


class LoadCategory(Enum):
    """Enumeration of load categories for grouping in reports."""

    TRANSMISSION = auto()
    PRODUCT = auto()
    INFILTRATION = auto()
    INTERNAL = auto()
    OTHER = auto()


@dataclass(frozen=True)
class LoadContext:
    """Coerced inputs and derived facts shared by all load calculators."""

    geometry: GeometryResult
    construction: ConstructionResult
    external_temp: float  # °C
    internal_temp: float  # °C
    operating_hours: float  # hrs/day
    product: ProductProperties
    daily_load: float  # kg/day
    incoming_temp: float  # °C
    outgoing_temp: float  # °C
    number_of_people: float
    working_hours: float  # hrs/day
    door_openings: float  # per day
    lighting_wattage: float  # W
    equipment_load: float  # W
    config: EngineConfig

    @property
    def temperature_difference(self) -> float:
        """External minus internal design temperature in °C."""
        return self.external_temp - self.internal_temp


class LoadCalculator(ABC):
    """
    Abstract base class for cold room heat load components.

    Attributes:
        name: Human-readable name of the load component
        category: Category of load (from LoadCategory enum)

    Abstract Methods:
        calculate: Return the component's sub-loads for a context
        get_load_variables_metadata: Return metadata for all sub-loads
    """

    def __init__(self, name: str, category: LoadCategory = LoadCategory.OTHER) -> None:
        """
        Initialize base calculator.

        Args:
            name: Human-readable name of the load component
            category: Category used to group this load in reports
        """
        self.name = name
        self.category = category

    @abstractmethod
    def calculate(self, context: LoadContext) -> Any:
        """
        Calculate this component's loads.

        Returns:
            A frozen result dataclass exposing each sub-load in kW and a
            ``total`` property.
        """
        pass

    @classmethod
    @abstractmethod
    def get_load_variables_metadata(cls) -> Dict[str, Dict[str, Any]]:
        """
        Return metadata describing each sub-load of the result.

        Returns:
            Dictionary mapping result attribute names to metadata dictionaries.
            Each metadata dict contains at least 'label' and 'unit'.

        Example:
            {
                "walls": {"label": "Walls", "unit": "kW"},
                "ceiling": {"label": "Ceiling", "unit": "kW"},
            }
        """
        pass

    def __str__(self) -> str:
        """Return string representation of the calculator."""
        return f"{self.__class__.__name__}({self.name})"

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}(name={self.name!r}, category={self.category.name})"
