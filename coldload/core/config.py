"""
Configuration management for cold room load calculation.

This module provides the engine parameters as a typed dataclass and the
complete set of design inputs, with support for loading both from YAML or
JSON files.

Usage:
    from coldload.core.config import (
        EngineConfig,
        DesignInputs,
        load_config,
        create_design_inputs,
    )

    # Load from file
    data = load_config("design.yaml")
    inputs = create_design_inputs(data.get("design", {}))

    # Or use defaults
    config = EngineConfig(air_changes_per_hour=1.0)
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Union
import json
import logging

import yaml

from coldload.core.constants import (
    DEFAULT_AIR_CHANGES_PER_HOUR,
    AIR_HEAT_CONTENT_KJ_PER_M3K,
    DOOR_OPENING_HEAT_KJ_PER_M2,
    PERSON_HEAT_KW,
    NEUTRAL_STORAGE_FACTOR,
)
from coldload.core.records import (
    RoomGeometry,
    Construction,
    AmbientConditions,
    ProductProfile,
    OperationalLoads,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Tunable constants of the load engine."""

    air_changes_per_hour: float = DEFAULT_AIR_CHANGES_PER_HOUR  # changes/hr
    air_heat_content: float = AIR_HEAT_CONTENT_KJ_PER_M3K  # kJ/(m³·K)
    door_opening_heat: float = DOOR_OPENING_HEAT_KJ_PER_M2  # kJ/(m²·opening)
    person_heat_kw: float = PERSON_HEAT_KW  # kW/person
    neutral_storage_factor: float = NEUTRAL_STORAGE_FACTOR


@dataclass(frozen=True)
class DesignInputs:
    """The five input records of one cold room design."""

    room: RoomGeometry = field(default_factory=RoomGeometry)
    construction: Construction = field(default_factory=Construction)
    ambient: AmbientConditions = field(default_factory=AmbientConditions)
    product: ProductProfile = field(default_factory=ProductProfile)
    operations: OperationalLoads = field(default_factory=OperationalLoads)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Dictionary of configuration values

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)
        elif path.suffix == ".json":
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save configuration to a YAML or JSON file.

    Args:
        config: Configuration dictionary
        path: Path to save the file
    """
    path = Path(path)

    if path.suffix not in (".yaml", ".yml", ".json"):
        raise ValueError(f"Unsupported config file format: {path.suffix}")

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix == ".json":
            json.dump(config, f, indent=2)
        else:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: Any) -> Dict[str, Any]:
    """
    Convert a dataclass config to a dictionary.

    Args:
        config: A dataclass instance

    Returns:
        Dictionary representation
    """
    return asdict(config)


def create_engine_config(data: Dict[str, Any]) -> EngineConfig:
    """Create an EngineConfig from a dictionary."""
    return EngineConfig(**{key: float(value) for key, value in data.items()})


def create_design_inputs(data: Dict[str, Any]) -> DesignInputs:
    """
    Create DesignInputs from a dictionary with optional sections.

    Sections that are missing keep their documented defaults.
    """
    return DesignInputs(
        room=RoomGeometry(**(data.get("room") or {})),
        construction=Construction(**(data.get("construction") or {})),
        ambient=AmbientConditions(**(data.get("ambient") or {})),
        product=ProductProfile(**(data.get("product") or {})),
        operations=OperationalLoads(**(data.get("operations") or {})),
    )


def get_default_inputs() -> DesignInputs:
    """Get the default design used when nothing has been entered yet."""
    return DesignInputs()


def get_default_config() -> EngineConfig:
    """Get the default engine parameters."""
    return EngineConfig()
