"""Performance tests for load evaluation speed.

These tests check the engine is fast enough to re-evaluate on every
keystroke of an interactive session.
"""

import time

from coldload.core.config import DesignInputs
from coldload.core.records import RoomGeometry
from coldload.engine import LoadEngine
from coldload.repository import InputStep
from coldload.session import DesignSession


class TestEnginePerformance:
    """Performance tests for the load engine."""

    def test_evaluation_speed(self):
        """Test that a single evaluation completes quickly."""
        engine = LoadEngine()
        inputs = DesignInputs()

        # Warm up
        engine.evaluate_inputs(inputs)

        # Time 1000 evaluations
        start = time.perf_counter()
        for _ in range(1000):
            engine.evaluate_inputs(inputs)
        elapsed = time.perf_counter() - start

        # Should complete 1000 evaluations in under 1s
        assert elapsed < 1.0, f"1000 evaluations took {elapsed:.3f}s (expected < 1.0s)"

    def test_degraded_evaluation_speed(self):
        """Test that diagnostics do not slow evaluation down noticeably."""
        engine = LoadEngine()
        inputs = DesignInputs(room=RoomGeometry("", "x", None, "", ""))

        start = time.perf_counter()
        for _ in range(200):
            engine.evaluate_inputs(inputs)
        elapsed = time.perf_counter() - start

        assert elapsed < 1.0, f"200 degraded evaluations took {elapsed:.3f}s"


class TestSessionPerformance:
    """Performance tests for interactive editing."""

    def test_session_update_speed(self):
        """Test a burst of edits recomputes quickly."""
        session = DesignSession()
        notified = []
        session.subscribe(notified.append)

        start = time.perf_counter()
        for i in range(500):
            session.update(InputStep.ROOM, length=5.0 + i * 0.01)
        elapsed = time.perf_counter() - start

        assert len(notified) == 501
        assert elapsed < 1.0, f"500 session updates took {elapsed:.3f}s (expected < 1.0s)"
