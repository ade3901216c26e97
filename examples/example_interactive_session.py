#!/usr/bin/env python
"""
Example design session.
Edits a design step by step, printing the new required capacity after each
change, and stores the inputs so the next run picks up where this one left off.
"""

from coldload.repository import InputStep, JsonFileRepository
from coldload.session import DesignSession


def show(result):
    status = " (check warnings)" if result.is_degraded else ""
    print(f"  Required capacity: {result.total_load_with_safety:.2f} kW{status}")


def main():
    session = DesignSession(repository=JsonFileRepository("cold_room_inputs.json"))
    session.subscribe(show)

    print("Enlarging the room to 8m x 6m x 3m")
    session.update(InputStep.ROOM, length=8.0, width=6.0, height=3.0)

    print("Switching to 3000 kg/day of chicken")
    session.update(InputStep.PRODUCT, product_type="Chicken", daily_load=3000.0)

    print("Thicker panels")
    session.update(InputStep.CONSTRUCTION, insulation_thickness=200)

    print("A typo in the door openings")
    session.update(InputStep.OPERATIONS, door_openings="2O")
    for diagnostic in session.result.diagnostics:
        print(f"  {diagnostic.field}: {diagnostic.message}")

    print("Fixed")
    session.update(InputStep.OPERATIONS, door_openings=20)

    storage = session.result.storage_capacity
    print(f"\nStorage: {storage.maximum:.0f} kg maximum, {storage.utilization:.1f}% used daily")
    print(f"Pull-down time (estimate): {session.result.pull_down_time_estimate:.1f} hours")
    print("Inputs saved to cold_room_inputs.json")


if __name__ == "__main__":
    main()
