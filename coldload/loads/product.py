"""
Product load: heat removed to cool and freeze the daily product intake.

The daily energy is spread evenly over 24 hours to give a continuous
average power. Three terms are reported separately:

- sensible heat above freezing, from the incoming temperature down to the
  freezing point (only when the product arrives above it)
- latent heat of freezing, applied once for the whole daily mass
- sensible heat below freezing, from the freezing point down to the
  outgoing temperature (only when the product leaves below it)

The two sensible guards are checked independently, so neither term can go
negative.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from coldload.core.diagnostics import Diagnostic, DiagnosticCode, short_repr
from coldload.loads.base import LoadCalculator, LoadCategory, LoadContext
from coldload.physics.thermal import (
    calculate_sensible_heat,
    calculate_latent_heat,
    kj_per_day_to_kw,
)
from coldload.tables import (
    DEFAULT_TABLES,
    ZERO_PRODUCT,
    ProductProperties,
    ProductType,
    ThermalPropertyTables,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductLoad:
    """Product loads in kW (24-hour averages)."""

    sensible_above: float
    latent: float
    sensible_below: float

    @property
    def total(self) -> float:
        return self.sensible_above + self.latent + self.sensible_below


def resolve_product(
    product_type,
    tables: ThermalPropertyTables = DEFAULT_TABLES,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> Tuple[Optional[ProductType], ProductProperties]:
    """
    Look up the thermal properties of a product.

    Unknown products resolve to :data:`ZERO_PRODUCT` and add a diagnostic.

    Returns:
        (parsed product type or None, properties)
    """
    if diagnostics is None:
        diagnostics = []
    parsed = ProductType.parse(product_type)
    properties = tables.lookup_product(parsed)
    if properties is None:
        logger.warning(
            "Unknown product type %s, using zeroed properties", short_repr(product_type)
        )
        diagnostics.append(
            Diagnostic(
                DiagnosticCode.UNKNOWN_PRODUCT,
                "product.product_type",
                f"No thermal properties for {short_repr(product_type)}; using zeroed properties",
            )
        )
        return parsed, ZERO_PRODUCT
    return parsed, properties


class ProductLoadCalculator(LoadCalculator):
    """Sensible and latent heat removal for the daily product mass."""

    def __init__(self) -> None:
        super().__init__("Product", LoadCategory.PRODUCT)

    def calculate(self, context: LoadContext) -> ProductLoad:
        product = context.product
        mass = context.daily_load
        freezing_point = product.freezing_point

        above_kj = 0.0
        if context.incoming_temp > freezing_point:
            above_kj = calculate_sensible_heat(
                mass, product.specific_heat_above, context.incoming_temp - freezing_point
            )

        latent_kj = calculate_latent_heat(mass, product.latent_heat)

        below_kj = 0.0
        if freezing_point > context.outgoing_temp:
            below_kj = calculate_sensible_heat(
                mass, product.specific_heat_below, freezing_point - context.outgoing_temp
            )

        return ProductLoad(
            sensible_above=kj_per_day_to_kw(above_kj),
            latent=kj_per_day_to_kw(latent_kj),
            sensible_below=kj_per_day_to_kw(below_kj),
        )

    @classmethod
    def get_load_variables_metadata(cls):
        return {
            "sensible_above": {"label": "Sensible heat (above freezing)", "unit": "kW"},
            "latent": {"label": "Latent heat (freezing)", "unit": "kW"},
            "sensible_below": {"label": "Sensible heat (below freezing)", "unit": "kW"},
        }
