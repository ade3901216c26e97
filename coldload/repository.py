"""
Persistence of design inputs between sessions.

Each workflow step (room, construction, conditions, product, operations) is
stored as its own record. When a step has never been saved, or its stored
value cannot be read, the documented default record is returned instead.

The load engine never touches a repository; only the session and the
command line do.

Usage:
    from coldload.repository import JsonFileRepository, InputStep

    repo = JsonFileRepository("~/.coldload/inputs.json")
    room = repo.load(InputStep.ROOM)
    repo.save(InputStep.ROOM, RoomGeometry(length=6.0))
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import os
import tempfile
import logging

from coldload.core.config import DesignInputs
from coldload.core.records import (
    RoomGeometry,
    Construction,
    AmbientConditions,
    ProductProfile,
    OperationalLoads,
)

logger = logging.getLogger(__name__)


class InputStep(Enum):
    """Workflow steps and the storage key of their record."""

    ROOM = "roomData"
    CONSTRUCTION = "constructionData"
    CONDITIONS = "conditionsData"
    PRODUCT = "productData"
    OPERATIONS = "operationsData"


RECORD_TYPES = {
    InputStep.ROOM: RoomGeometry,
    InputStep.CONSTRUCTION: Construction,
    InputStep.CONDITIONS: AmbientConditions,
    InputStep.PRODUCT: ProductProfile,
    InputStep.OPERATIONS: OperationalLoads,
}

# DesignInputs attribute holding each step's record
INPUT_ATTRIBUTES = {
    InputStep.ROOM: "room",
    InputStep.CONSTRUCTION: "construction",
    InputStep.CONDITIONS: "ambient",
    InputStep.PRODUCT: "product",
    InputStep.OPERATIONS: "operations",
}


def record_from_dict(step: InputStep, data: Dict[str, Any]):
    """Build the step's record, ignoring keys the record does not define."""
    record_type = RECORD_TYPES[step]
    known = {f.name for f in fields(record_type)}
    unknown = set(data) - known
    if unknown:
        logger.debug("Ignoring unknown keys for %s: %s", step.value, sorted(unknown))
    return record_type(**{key: value for key, value in data.items() if key in known})


class InputRepository(ABC):
    """
    Abstract store of input records, one per workflow step.

    Subclasses implement raw access to a JSON-compatible dictionary per step.
    """

    @abstractmethod
    def _read(self, step: InputStep) -> Optional[Dict[str, Any]]:
        """Return the stored dictionary for a step, or None if absent."""
        pass

    @abstractmethod
    def _write(self, step: InputStep, data: Dict[str, Any]) -> None:
        """Store the dictionary for a step."""
        pass

    def load(self, step: InputStep):
        """Load a step's record, falling back to its defaults."""
        data = self._read(step)
        if data is None:
            return RECORD_TYPES[step]()
        return record_from_dict(step, data)

    def save(self, step: InputStep, record) -> None:
        """Store a step's record."""
        if not isinstance(record, RECORD_TYPES[step]):
            raise TypeError(
                f"Expected {RECORD_TYPES[step].__name__} for {step.name}, "
                f"got {type(record).__name__}"
            )
        self._write(step, asdict(record))

    def load_inputs(self) -> DesignInputs:
        """Load all steps at once."""
        return DesignInputs(**{INPUT_ATTRIBUTES[step]: self.load(step) for step in InputStep})

    def save_inputs(self, inputs: DesignInputs) -> None:
        """Store all steps at once."""
        for step in InputStep:
            self.save(step, getattr(inputs, INPUT_ATTRIBUTES[step]))


class InMemoryRepository(InputRepository):
    """Repository kept in a dictionary, for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self._store: Dict[str, Dict[str, Any]] = dict(initial or {})

    def _read(self, step: InputStep) -> Optional[Dict[str, Any]]:
        data = self._store.get(step.value)
        return dict(data) if data is not None else None

    def _write(self, step: InputStep, data: Dict[str, Any]) -> None:
        self._store[step.value] = dict(data)


class JsonFileRepository(InputRepository):
    """
    Repository backed by a single JSON file keyed by step.

    A missing file is treated as empty. A file that cannot be decoded or
    parsed is logged and treated as empty, so every step falls back to its
    defaults. Saves replace the whole file atomically.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def _load_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            logger.error("Error loading saved inputs from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Saved inputs in %s are not an object, ignoring", self.path)
            return {}
        return data

    def _read(self, step: InputStep) -> Optional[Dict[str, Any]]:
        data = self._load_file().get(step.value)
        if data is not None and not isinstance(data, dict):
            logger.error("Saved %s in %s is not an object, ignoring", step.value, self.path)
            return None
        return data

    def _write(self, step: InputStep, data: Dict[str, Any]) -> None:
        contents = self._load_file()
        contents[step.value] = data
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write beside the target and swap it in, so an interrupted save
        # leaves the previous file intact
        temp_file = tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".tmp",
            prefix=f".{self.path.name}.",
            dir=self.path.parent,
            delete=False,
            encoding="utf-8",
        )
        try:
            with temp_file:
                json.dump(contents, temp_file, indent=2)
            os.replace(temp_file.name, self.path)
        except BaseException:
            os.unlink(temp_file.name)
            raise
