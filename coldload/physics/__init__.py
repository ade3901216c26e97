"""Physics calculations for cold room load estimation."""

from coldload.physics.thermal import (
    calculate_conduction_load,
    calculate_sensible_heat,
    calculate_latent_heat,
    calculate_air_change_load,
    kj_per_day_to_kw,
    watts_to_kw,
    convert_kw_to_btu,
    convert_kw_to_tons,
)

__all__ = [
    "calculate_conduction_load",
    "calculate_sensible_heat",
    "calculate_latent_heat",
    "calculate_air_change_load",
    "kj_per_day_to_kw",
    "watts_to_kw",
    "convert_kw_to_btu",
    "convert_kw_to_tons",
]
