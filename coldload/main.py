#!/usr/bin/env python3
"""
Command line entry point: evaluate a cold room design and print the report.

    python -m coldload                       # documented defaults
    python -m coldload --config design.yaml  # design/engine/tables from file
    python -m coldload --inputs inputs.json --json
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from coldload.core.config import (
    DesignInputs,
    create_design_inputs,
    create_engine_config,
    load_config,
)
from coldload.engine import LoadEngine
from coldload.report import format_report, plot_breakdown
from coldload.repository import JsonFileRepository
from coldload.tables import ThermalPropertyTables, load_tables

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coldload", description="Estimate the refrigeration load of a cold storage room."
    )
    parser.add_argument("--config", help="YAML or JSON file with design, engine and tables sections")
    parser.add_argument("--inputs", help="JSON file of saved step inputs (overrides the design section)")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--plot", help="save a load breakdown chart to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _resolve_tables(section, config_path: Path):
    if section is None:
        return None
    if isinstance(section, str):
        tables_path = Path(section)
        if not tables_path.is_absolute():
            tables_path = config_path.parent / tables_path
        return load_tables(tables_path)
    return ThermalPropertyTables.from_dict(section)


def main(argv=None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    inputs = DesignInputs()
    engine = LoadEngine()
    if args.config:
        config_path = Path(args.config)
        try:
            data = load_config(config_path) or {}
            inputs = create_design_inputs(data.get("design") or {})
            engine = LoadEngine(
                config=create_engine_config(data.get("engine") or {}),
                tables=_resolve_tables(data.get("tables"), config_path),
            )
        except (FileNotFoundError, ValueError, TypeError) as e:
            logger.error("Could not load configuration %s: %s", config_path, e)
            return 2
        logger.info("Loaded design from %s", config_path)

    if args.inputs:
        inputs = JsonFileRepository(args.inputs).load_inputs()
        logger.info("Loaded saved inputs from %s", args.inputs)

    result = engine.evaluate_inputs(inputs)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(result), end="")

    if args.plot:
        fig = plot_breakdown(result, path=args.plot)
        plt.close(fig)
        logger.info("Load breakdown chart saved to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
