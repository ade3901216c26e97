"""
Interactive design session.

Holds the current input records, re-evaluates the engine once per change
and notifies subscribers with the new :class:`LoadBreakdown`. This replaces
polling: nothing is recomputed unless an input actually changes.

Usage:
    session = DesignSession(repository=JsonFileRepository("inputs.json"))
    session.subscribe(lambda result: print(result.total_load_with_safety))
    session.update(InputStep.ROOM, length="6.0")
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from coldload.core.config import DesignInputs
from coldload.engine import LoadBreakdown, LoadEngine
from coldload.repository import INPUT_ATTRIBUTES, RECORD_TYPES, InputRepository, InputStep

logger = logging.getLogger(__name__)

Subscriber = Callable[[LoadBreakdown], None]


class DesignSession:
    """Current design inputs plus the latest evaluation result."""

    def __init__(
        self,
        engine: Optional[LoadEngine] = None,
        repository: Optional[InputRepository] = None,
        inputs: Optional[DesignInputs] = None,
    ) -> None:
        self.engine = engine or LoadEngine()
        self.repository = repository
        if inputs is None:
            inputs = repository.load_inputs() if repository is not None else DesignInputs()
        self._inputs = inputs
        self._subscribers: List[Subscriber] = []
        self._result = self.engine.evaluate_inputs(self._inputs)

    @property
    def inputs(self) -> DesignInputs:
        return self._inputs

    @property
    def result(self) -> LoadBreakdown:
        return self._result

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for new results.

        The callback is called immediately with the current result.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)
        callback(self._result)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_record(self, step: InputStep, record) -> LoadBreakdown:
        """Replace one step's record and recompute if it changed."""
        if not isinstance(record, RECORD_TYPES[step]):
            raise TypeError(
                f"Expected {RECORD_TYPES[step].__name__} for {step.name}, "
                f"got {type(record).__name__}"
            )
        attribute = INPUT_ATTRIBUTES[step]
        if getattr(self._inputs, attribute) == record:
            return self._result

        self._inputs = replace(self._inputs, **{attribute: record})
        if self.repository is not None:
            self.repository.save(step, record)
        return self._recompute()

    def update(self, step: InputStep, **changes) -> LoadBreakdown:
        """Change individual fields of one step's record."""
        record = getattr(self._inputs, INPUT_ATTRIBUTES[step])
        return self.set_record(step, replace(record, **changes))

    def refresh(self) -> LoadBreakdown:
        """
        Reload inputs from the repository and notify subscribers.

        Used when a results view regains focus and another view may have
        saved new inputs in the meantime.
        """
        if self.repository is not None:
            self._inputs = self.repository.load_inputs()
        return self._recompute()

    def _recompute(self) -> LoadBreakdown:
        self._result = self.engine.evaluate_inputs(self._inputs)
        logger.debug("Recomputed load: %.3f kW", self._result.total_load_with_safety)
        for callback in list(self._subscribers):
            callback(self._result)
        return self._result
