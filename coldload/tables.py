"""
Static thermal reference data for cold room sizing.

Holds the three lookup tables the engine reads:
- U-factor by insulation type and panel thickness (W/m²K)
- Thermal properties per stored product
- Packing factor per storage arrangement

Keys are closed enumerations. Every lookup returns ``None`` when a key is
absent so the caller decides the fallback explicitly.

The built-in tables are exposed as :data:`DEFAULT_TABLES`. Tables owned
outside the package can be loaded from YAML or JSON with :func:`load_tables`.

Usage:
    from coldload.tables import DEFAULT_TABLES, InsulationType

    u = DEFAULT_TABLES.lookup_u_factor(InsulationType.PUF, 150)  # 0.15
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

logger = logging.getLogger(__name__)

TABLES_VERSION = "2024.1"


class _KeyedEnum(Enum):
    """Enum whose values are the display keys used by the input layer."""

    @classmethod
    def parse(cls, key: Any):
        """Return the member for ``key`` (case-insensitive), or None if unknown."""
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        wanted = key.strip().lower()
        for member in cls:
            if member.value.lower() == wanted or member.name.lower() == wanted:
                return member
        return None


class InsulationType(_KeyedEnum):
    """Panel core materials, best to worst thermal performance."""

    PUF = "PUF"  # polyurethane foam
    EPS = "EPS"  # expanded polystyrene
    ROCKWOOL = "Rockwool"


class ProductType(_KeyedEnum):
    """Products with tabulated thermal properties."""

    BEEF = "Beef"
    PORK = "Pork"
    LAMB = "Lamb"
    CHICKEN = "Chicken"
    FISH = "Fish"
    ICE_CREAM = "Ice Cream"
    DAIRY = "Dairy"
    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"


class StorageType(_KeyedEnum):
    """How product is stacked inside the room."""

    BOXED = "Boxed"
    PALLETIZED = "Palletized"
    HANGING = "Hanging"
    SHELVED = "Shelved"
    BULK = "Bulk"


INSULATION_THICKNESSES_MM = (75, 100, 125, 150, 200)


@dataclass(frozen=True)
class ProductProperties:
    """Thermal and storage properties of a product."""

    specific_heat_above: float  # kJ/(kg·K) above freezing
    specific_heat_below: float  # kJ/(kg·K) below freezing
    latent_heat: float  # kJ/kg
    freezing_point: float  # °C
    density: float  # kg/m³
    storage_efficiency: float  # fraction of room volume usable for product

    def energy_per_kg(self, incoming_temp: float, outgoing_temp: float) -> float:
        """
        Heat to remove from one kilogram between two temperatures (kJ/kg).

        Sensible terms only count on the side of the freezing point they
        belong to; the latent term is always included.
        """
        above = 0.0
        if incoming_temp > self.freezing_point:
            above = self.specific_heat_above * (incoming_temp - self.freezing_point)
        below = 0.0
        if self.freezing_point > outgoing_temp:
            below = self.specific_heat_below * (self.freezing_point - outgoing_temp)
        return above + self.latent_heat + below


# Fallback record for products missing from the table
ZERO_PRODUCT = ProductProperties(
    specific_heat_above=0.0,
    specific_heat_below=0.0,
    latent_heat=0.0,
    freezing_point=0.0,
    density=0.0,
    storage_efficiency=0.0,
)


DEFAULT_U_FACTORS: Dict[InsulationType, Dict[int, float]] = {
    InsulationType.PUF: {75: 0.30, 100: 0.22, 125: 0.18, 150: 0.15, 200: 0.11},
    InsulationType.EPS: {75: 0.46, 100: 0.35, 125: 0.28, 150: 0.23, 200: 0.18},
    InsulationType.ROCKWOOL: {75: 0.52, 100: 0.40, 125: 0.32, 150: 0.27, 200: 0.20},
}

DEFAULT_PRODUCTS: Dict[ProductType, ProductProperties] = {
    ProductType.BEEF: ProductProperties(3.14, 1.67, 233.0, -1.7, 1050.0, 0.60),
    ProductType.PORK: ProductProperties(2.60, 1.46, 195.0, -2.2, 1000.0, 0.60),
    ProductType.LAMB: ProductProperties(2.93, 1.60, 216.0, -1.9, 1000.0, 0.60),
    ProductType.CHICKEN: ProductProperties(3.32, 1.77, 247.0, -2.8, 950.0, 0.55),
    ProductType.FISH: ProductProperties(3.18, 1.71, 244.0, -2.2, 1000.0, 0.55),
    ProductType.ICE_CREAM: ProductProperties(2.95, 1.63, 220.0, -5.6, 550.0, 0.65),
    ProductType.DAIRY: ProductProperties(3.77, 1.95, 270.0, -0.6, 1030.0, 0.60),
    ProductType.VEGETABLES: ProductProperties(3.89, 1.94, 300.0, -0.8, 600.0, 0.50),
    ProductType.FRUITS: ProductProperties(3.73, 1.89, 282.0, -1.1, 650.0, 0.50),
}

DEFAULT_STORAGE_FACTORS: Dict[StorageType, float] = {
    StorageType.BOXED: 0.8,
    StorageType.PALLETIZED: 0.7,
    StorageType.HANGING: 0.5,
    StorageType.SHELVED: 0.6,
    StorageType.BULK: 0.9,
}


@dataclass(frozen=True)
class ThermalPropertyTables:
    """Versioned, read-only set of reference tables."""

    version: str = TABLES_VERSION
    u_factors: Dict[InsulationType, Dict[int, float]] = field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_U_FACTORS.items()}
    )
    products: Dict[ProductType, ProductProperties] = field(
        default_factory=lambda: dict(DEFAULT_PRODUCTS)
    )
    storage_factors: Dict[StorageType, float] = field(
        default_factory=lambda: dict(DEFAULT_STORAGE_FACTORS)
    )

    def lookup_u_factor(
        self, insulation_type: Optional[InsulationType], thickness_mm: Optional[int]
    ) -> Optional[float]:
        """U-factor for the pair, or None if either key is not tabulated."""
        if insulation_type is None or thickness_mm is None:
            return None
        return self.u_factors.get(insulation_type, {}).get(thickness_mm)

    def lookup_product(self, product_type: Optional[ProductType]) -> Optional[ProductProperties]:
        if product_type is None:
            return None
        return self.products.get(product_type)

    def lookup_storage_factor(self, storage_type: Optional[StorageType]) -> Optional[float]:
        if storage_type is None:
            return None
        return self.storage_factors.get(storage_type)

    def thicknesses_for(self, insulation_type: InsulationType):
        """Sorted panel thicknesses tabulated for an insulation type."""
        return sorted(self.u_factors.get(insulation_type, {}))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the display keys, suitable for save_config()."""
        return {
            "version": self.version,
            "u_factors": {
                t.value: {str(mm): u for mm, u in sorted(rows.items())}
                for t, rows in self.u_factors.items()
            },
            "products": {p.value: asdict(props) for p, props in self.products.items()},
            "storage_factors": {s.value: f for s, f in self.storage_factors.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ThermalPropertyTables":
        """
        Build tables from a dictionary as produced by :meth:`to_dict`.

        Sections that are missing fall back to the built-in defaults.

        Raises:
            ValueError: If a key is not a known insulation, product or storage type
        """
        u_factors = {k: dict(v) for k, v in DEFAULT_U_FACTORS.items()}
        if "u_factors" in data:
            u_factors = {}
            for key, rows in data["u_factors"].items():
                insulation = _require(InsulationType, key)
                u_factors[insulation] = {int(mm): float(u) for mm, u in rows.items()}

        products = dict(DEFAULT_PRODUCTS)
        if "products" in data:
            products = {}
            for key, props in data["products"].items():
                products[_require(ProductType, key)] = ProductProperties(
                    **{name: float(value) for name, value in props.items()}
                )

        storage_factors = dict(DEFAULT_STORAGE_FACTORS)
        if "storage_factors" in data:
            storage_factors = {
                _require(StorageType, key): float(value)
                for key, value in data["storage_factors"].items()
            }

        return cls(
            version=str(data.get("version", TABLES_VERSION)),
            u_factors=u_factors,
            products=products,
            storage_factors=storage_factors,
        )


def _require(enum_cls, key):
    member = enum_cls.parse(key)
    if member is None:
        raise ValueError(f"Unknown {enum_cls.__name__} key in tables: {key!r}")
    return member


def load_tables(path: Union[str, Path]) -> ThermalPropertyTables:
    """
    Load reference tables from a YAML or JSON file.

    Args:
        path: Path to the tables file

    Returns:
        ThermalPropertyTables built from the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the format or a table key is not supported
    """
    from coldload.core.config import load_config

    tables = ThermalPropertyTables.from_dict(load_config(path) or {})
    logger.info("Loaded thermal tables version %s from %s", tables.version, path)
    return tables


DEFAULT_TABLES = ThermalPropertyTables()
