#!/usr/bin/env python
"""
Example sizing of a beef freezer room.
Evaluates the default design, prints the report and compares insulation
choices at every panel thickness.
"""

import matplotlib.pyplot as plt
import numpy as np

from coldload import Construction, DesignInputs, LoadEngine, InsulationType
from coldload.construction import rank_insulation_types
from coldload.report import format_report, plot_breakdown
from coldload.tables import INSULATION_THICKNESSES_MM


def main():
    engine = LoadEngine()
    inputs = DesignInputs()  # 4m x 3m x 2.5m room, 1000 kg/day of beef to -18°C

    result = engine.evaluate_inputs(inputs)
    print(format_report(result))

    fig = plot_breakdown(result, path="cold_room_breakdown.png")
    plt.close(fig)
    print("Load breakdown saved to cold_room_breakdown.png")

    # Required capacity for every insulation type and thickness
    capacities = {}
    for insulation in InsulationType:
        capacities[insulation] = [
            engine.evaluate(
                inputs.room,
                Construction(insulation.value, thickness),
                inputs.ambient,
                inputs.product,
                inputs.operations,
            ).total_load_with_safety
            for thickness in INSULATION_THICKNESSES_MM
        ]

    plot_insulation_comparison(capacities)
    print_ranking()


def plot_insulation_comparison(capacities):
    """Plot required capacity against panel thickness for each insulation."""
    fig, ax = plt.subplots(figsize=(8, 5))
    positions = np.arange(len(INSULATION_THICKNESSES_MM))
    width = 0.8 / len(capacities)

    for i, (insulation, values) in enumerate(capacities.items()):
        ax.bar(positions + i * width, values, width, label=insulation.value)

    ax.set_xticks(positions + width * (len(capacities) - 1) / 2)
    ax.set_xticklabels([f"{mm} mm" for mm in INSULATION_THICKNESSES_MM])
    ax.set_ylabel('Required capacity (kW)')
    ax.set_title('Required Capacity by Insulation')
    ax.legend()
    ax.grid(True, axis='y')

    plt.tight_layout()
    plt.savefig('insulation_comparison.png')
    plt.close(fig)
    print("Insulation comparison saved to insulation_comparison.png")


def print_ranking():
    """Print insulation types from best to worst at each thickness."""
    print("\nInsulation ranking (lowest U-factor first):")
    for thickness in INSULATION_THICKNESSES_MM:
        ranking = rank_insulation_types(thickness)
        entries = ", ".join(f"{insulation.value} {u:.2f}" for insulation, u in ranking)
        print(f"  {thickness:>3} mm: {entries}")


if __name__ == "__main__":
    main()
