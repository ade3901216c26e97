"""
Insulation U-factor and R-value resolution.

The (type, thickness) pair is looked up in the reference tables. A pair that
is not tabulated gives ``u_factor == 0`` with ``found == False`` and an
undefined (``None``) R-value; 1/0 is never computed.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from coldload.core.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    as_label,
    coerce_float,
    short_repr,
)
from coldload.core.records import Construction
from coldload.tables import DEFAULT_TABLES, InsulationType, ThermalPropertyTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstructionResult:
    """Resolved thermal performance of the room envelope."""

    insulation_type: Optional[InsulationType]
    requested_type: str
    thickness_mm: Optional[int]
    u_factor: float  # W/m²K, 0 when not tabulated
    r_value: Optional[float]  # m²K/W, None when undefined

    @property
    def found(self) -> bool:
        return self.u_factor > 0

    @property
    def type_label(self) -> str:
        if self.insulation_type is not None:
            return self.insulation_type.value
        return self.requested_type


def _parse_thickness(raw, diagnostics: List[Diagnostic]) -> Optional[int]:
    thickness = coerce_float(raw, "construction.insulation_thickness", diagnostics)
    if thickness <= 0 or not thickness.is_integer():
        return None
    return int(thickness)


def evaluate_construction(
    construction: Construction,
    tables: ThermalPropertyTables = DEFAULT_TABLES,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> ConstructionResult:
    """
    Resolve U-factor and R-value for the chosen insulation.

    Args:
        construction: Raw construction record
        tables: Reference tables to read from
        diagnostics: Optional list that receives lookup diagnostics

    Returns:
        ConstructionResult; never raises for unknown keys
    """
    if diagnostics is None:
        diagnostics = []

    insulation_type = InsulationType.parse(construction.insulation_type)
    thickness = _parse_thickness(construction.insulation_thickness, diagnostics)
    u_factor = tables.lookup_u_factor(insulation_type, thickness)

    if u_factor is None or u_factor <= 0:
        logger.warning(
            "No U-factor for insulation %s at %s mm",
            short_repr(construction.insulation_type),
            short_repr(construction.insulation_thickness),
        )
        message = (
            f"No U-factor tabulated for {short_repr(construction.insulation_type)} "
            f"at {short_repr(construction.insulation_thickness)} mm; using 0"
        )
        available = (
            tables.thicknesses_for(insulation_type) if insulation_type is not None else []
        )
        if available:
            message += f" (tabulated: {', '.join(str(mm) for mm in available)} mm)"
        diagnostics.append(Diagnostic(DiagnosticCode.UNKNOWN_INSULATION, "construction", message))
        diagnostics.append(
            Diagnostic(
                DiagnosticCode.UNDEFINED_R_VALUE,
                "construction.r_value",
                "R-value is undefined for a zero U-factor",
            )
        )
        u_factor = 0.0
        r_value = None
    else:
        r_value = 1 / u_factor

    return ConstructionResult(
        insulation_type=insulation_type,
        requested_type=as_label(construction.insulation_type),
        thickness_mm=thickness,
        u_factor=u_factor,
        r_value=r_value,
    )


def rank_insulation_types(
    thickness_mm: int, tables: ThermalPropertyTables = DEFAULT_TABLES
) -> List[Tuple[InsulationType, float]]:
    """
    Order insulation types from best to worst at a given panel thickness.

    Types without a tabulated value at that thickness are left out.

    Returns:
        List of (insulation type, U-factor) pairs, lowest U-factor first
    """
    ranking = []
    for insulation_type in InsulationType:
        u_factor = tables.lookup_u_factor(insulation_type, thickness_mm)
        if u_factor is not None:
            ranking.append((insulation_type, u_factor))
    return sorted(ranking, key=lambda pair: pair[1])
