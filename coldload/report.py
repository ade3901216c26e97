"""
Presentation of a LoadBreakdown: text report, load shares and a bar chart.
"""

from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from coldload.core.constants import SAFETY_FRACTION
from coldload.engine import LoadBreakdown
from coldload.loads.infiltration import InfiltrationLoadCalculator
from coldload.loads.internal import InternalLoadCalculator
from coldload.loads.product import ProductLoadCalculator
from coldload.loads.transmission import TransmissionLoadCalculator
from coldload.physics.thermal import convert_kw_to_btu, convert_kw_to_tons

SHARE_CATEGORIES = ("Transmission", "Product", "Air change", "Door opening", "Internal")


def load_shares(result: LoadBreakdown) -> Dict[str, float]:
    """
    Percentage of the total load contributed by each category.

    Returns all zeros when the total load is not positive.
    """
    values = _category_values(result)
    total = result.total_load
    if total <= 0:
        return {name: 0.0 for name in values}
    return {name: value / total * 100 for name, value in values.items()}


def _category_values(result: LoadBreakdown) -> Dict[str, float]:
    return dict(
        zip(
            SHARE_CATEGORIES,
            (
                result.transmission_load.total,
                result.product_load.total,
                result.air_infiltration_load,
                result.door_load,
                result.internal_loads.total,
            ),
        )
    )


def _row(label: str, value: str, width: int = 44) -> str:
    return f"  {label:<{width}}{value:>14}"


def _section(title: str) -> List[str]:
    return ["", title, "-" * len(title)]


def format_report(result: LoadBreakdown) -> str:
    """Render the result as a plain-text report."""
    geometry = result.geometry
    construction = result.construction
    storage = result.storage_capacity
    lines = [
        "Total Cooling Capacity Required",
        f"  {result.total_load_with_safety:.2f} kW "
        f"({convert_kw_to_tons(result.total_load_with_safety):.2f} TR, "
        f"{convert_kw_to_btu(result.total_load_with_safety):,.0f} BTU/hr)",
        f"  Daily Energy Consumption: {result.daily_energy_kwh:.1f} kWh",
    ]

    lines += _section("Storage Information")
    lines.append(_row("Maximum Storage Capacity:", f"{storage.maximum:.0f} kg"))
    lines.append(_row("Current Daily Load:", f"{result.product_info.mass:g} kg"))
    lines.append(_row("Storage Utilization:", f"{storage.utilization:.1f}%"))

    lines += _section("Transmission Loads")
    for name, meta in TransmissionLoadCalculator.get_load_variables_metadata().items():
        area = getattr(geometry, meta["area"])
        label = f"{meta['label']} ({area:.1f} m²):"
        lines.append(_row(label, f"{getattr(result.transmission_load, name):.3f} kW"))
    lines.append(_row("Subtotal Transmission:", f"{result.transmission_load.total:.3f} kW"))

    lines += _section("Product Load")
    lines.append(_row("Product mass:", f"{result.product_info.mass:g} kg/day"))
    for name, meta in ProductLoadCalculator.get_load_variables_metadata().items():
        lines.append(_row(f"{meta['label']}:", f"{getattr(result.product_load, name):.3f} kW"))
    lines.append(_row("Subtotal Product:", f"{result.product_load.total:.3f} kW"))

    infiltration_meta = InfiltrationLoadCalculator.get_load_variables_metadata()
    lines += _section("Air Change Load")
    lines.append(_row("Room volume:", f"{result.volume:.1f} m³"))
    lines.append(_row("Air change rate:", f"{result.air_change_rate:g} changes/hr"))
    lines.append(
        _row(f"{infiltration_meta['air_change']['label']}:", f"{result.air_infiltration_load:.3f} kW")
    )

    lines += _section("Door Opening Load")
    lines.append(_row("Door area:", f"{geometry.door_area:.1f} m²"))
    lines.append(_row("Daily openings:", f"{result.operations.door_openings:g} times/day"))
    lines.append(
        _row(f"{infiltration_meta['door_opening']['label']}:", f"{result.door_load:.3f} kW")
    )

    lines += _section("Internal Loads")
    for name, meta in InternalLoadCalculator.get_load_variables_metadata().items():
        label = meta["label"]
        if name == "people":
            label = f"{label} ({result.operations.working_hours:g}h/24h)"
        lines.append(_row(f"{label}:", f"{getattr(result.internal_loads, name):.3f} kW"))
    lines.append(_row("Subtotal Internal:", f"{result.internal_loads.total:.3f} kW"))

    lines += _section("Final Calculation")
    lines.append(_row("Total calculated load:", f"{result.total_load:.3f} kW"))
    safety_label = f"Safety factor ({SAFETY_FRACTION:.0%}):"
    lines.append(_row(safety_label, f"+{result.safety_margin:.3f} kW"))
    lines.append(_row("FINAL REQUIRED CAPACITY:", f"{result.total_load_with_safety:.2f} kW"))

    lines += _section("Room Specifications Summary")
    lines.append(
        f"  Dimensions: {geometry.length:g}m x {geometry.width:g}m x {geometry.height:g}m"
    )
    lines.append(f"  Door size: {geometry.door_width:g}m x {geometry.door_height:g}m")
    lines.append(f"  Room volume: {result.volume:.1f} m³")
    lines.append(f"  Temperature difference: {result.temperature_difference:.1f}°C")

    lines += _section("Construction Details")
    thickness = construction.thickness_mm if construction.thickness_mm is not None else "?"
    lines.append(f"  Insulation: {construction.type_label}")
    lines.append(f"  Thickness: {thickness}mm")
    lines.append(f"  U-Factor: {construction.u_factor:.3f} W/m²K")
    if construction.r_value is None:
        lines.append("  R-Value: undefined")
    else:
        lines.append(f"  R-Value: {construction.r_value:.2f} m²K/W")

    lines += _section("Product Information")
    info = result.product_info
    lines.append(f"  Product: {info.product_type}")
    lines.append(f"  Daily load: {info.mass:g} kg")
    lines.append(f"  Temperature range: {info.incoming_temp:g}°C -> {info.outgoing_temp:g}°C")
    lines.append(f"  Storage type: {storage.storage_type}")
    lines.append(f"  Pull-down time (estimate): {result.pull_down_time_estimate:.1f} hours")

    if result.diagnostics:
        lines += _section("Warnings")
        for diagnostic in result.diagnostics:
            lines.append(f"  [{diagnostic.code.value}] {diagnostic.field}: {diagnostic.message}")

    return "\n".join(lines) + "\n"


def plot_breakdown(result: LoadBreakdown, path: Optional[str] = None, ax=None):
    """
    Draw a horizontal bar chart of the load categories.

    Args:
        result: Evaluation result to plot
        path: Optional file to save the figure to
        ax: Optional matplotlib Axes to draw on

    Returns:
        The matplotlib Figure
    """
    values = _category_values(result)
    shares = load_shares(result)

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    positions = np.arange(len(values))
    kw = np.array(list(values.values()))
    bars = ax.barh(positions, kw, color="#3B82F6")
    ax.set_yticks(positions)
    ax.set_yticklabels(list(values.keys()))
    ax.invert_yaxis()
    ax.set_xlabel("Load (kW)")
    ax.set_title(
        f"Cooling load breakdown: {result.total_load_with_safety:.2f} kW incl. safety margin"
    )
    for bar, name in zip(bars, values):
        ax.annotate(
            f"{shares[name]:.0f}%",
            (bar.get_width(), bar.get_y() + bar.get_height() / 2),
            xytext=(3, 0),
            textcoords="offset points",
            va="center",
        )
    ax.grid(True, axis="x")
    fig.tight_layout()

    if path:
        fig.savefig(path)
    return fig
