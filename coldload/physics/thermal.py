"""
Thermal calculations for cold room load estimation.

This module provides the fundamental heat transfer formulas shared by the
load calculators. All calculations use consistent units:
- Temperature: °C
- Length / area / volume: m, m², m³
- Energy: kJ
- Power: kW

Usage:
    from coldload.physics.thermal import calculate_conduction_load, kj_per_day_to_kw

    walls_kw = calculate_conduction_load(u_factor=0.15, area=35.0, delta_t=53.0)
    product_kw = kj_per_day_to_kw(250000.0)
"""

from coldload.core.constants import (
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    WATTS_PER_KW,
    BTU_PER_HR_PER_KW,
    KW_PER_TON,
)


def calculate_conduction_load(u_factor: float, area: float, delta_t: float) -> float:
    """
    Calculate steady-state heat gain through an envelope surface.

    Uses the formula: Q = U * A * ΔT

    Args:
        u_factor: Overall heat transfer coefficient in W/m²K
        area: Surface area in m²
        delta_t: Outside minus inside temperature in °C

    Returns:
        Heat gain in kW

    Example:
        >>> calculate_conduction_load(0.15, 35.0, 53.0)
        0.27825  # 0.15 W/m²K * 35 m² * 53 K / 1000
    """
    return u_factor * area * delta_t / WATTS_PER_KW


def calculate_sensible_heat(mass: float, specific_heat: float, delta_t: float) -> float:
    """
    Calculate heat removed when cooling a mass without phase change.

    Uses the formula: Q = m * Cp * ΔT

    Args:
        mass: Mass in kg
        specific_heat: Specific heat in kJ/(kg·K)
        delta_t: Temperature drop in °C

    Returns:
        Heat in kJ
    """
    return mass * specific_heat * delta_t


def calculate_latent_heat(mass: float, latent_heat: float) -> float:
    """
    Calculate heat removed when freezing a mass.

    Args:
        mass: Mass in kg
        latent_heat: Latent heat of fusion in kJ/kg

    Returns:
        Heat in kJ
    """
    return mass * latent_heat


def calculate_air_change_load(
    volume: float, air_changes_per_hour: float, heat_content: float, delta_t: float
) -> float:
    """
    Calculate the load of cooling infiltrating replacement air.

    Q = V * ACH * (ρ·cp) * ΔT, with the hourly volume spread over 3600 s

    Args:
        volume: Room volume in m³
        air_changes_per_hour: Room air changes per hour
        heat_content: Volumetric heat content of air in kJ/(m³·K)
        delta_t: Outside minus inside temperature in °C

    Returns:
        Load in kW

    Example:
        >>> calculate_air_change_load(30.0, 0.5, 1.3, 53.0)
        0.28708...  # 15 m³/hr * 1.3 kJ/m³K * 53 K / 3600 s
    """
    if volume <= 0 or air_changes_per_hour <= 0:
        return 0.0
    return volume * air_changes_per_hour * heat_content * delta_t / SECONDS_PER_HOUR


def kj_per_day_to_kw(energy_kj: float) -> float:
    """
    Convert a daily energy amount to its 24-hour average power.

    Args:
        energy_kj: Energy per day in kJ

    Returns:
        Average power in kW
    """
    return energy_kj / SECONDS_PER_DAY


def watts_to_kw(watts: float) -> float:
    """Convert watts to kilowatts."""
    return watts / WATTS_PER_KW


def convert_kw_to_btu(kw: float) -> float:
    """
    Convert kilowatts to BTU/hr.

    Args:
        kw: Power in kilowatts

    Returns:
        Power in BTU/hr
    """
    return kw * BTU_PER_HR_PER_KW


def convert_kw_to_tons(kw: float) -> float:
    """
    Convert kilowatts to tons of refrigeration.

    Args:
        kw: Power in kilowatts

    Returns:
        Capacity in tons of refrigeration
    """
    return kw / KW_PER_TON
