"""
Assembly Stats — Startup Statistics
=====================================
In-memory timers and counters collected during bootstrap.
Disposable: nothing is persisted, a restart resets everything.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator


class Stat(Enum):
    """Named statistics. Timers are in milliseconds."""

    CONFIGURATION_TIME = "configuration_time_ms"
    BUNDLE_RESOLUTION_TIME = "bundle_resolution_time_ms"
    CONFIGURATORS_TIME = "configurators_time_ms"
    FINALIZATION_TIME = "finalization_time_ms"
    REGISTRATION_COUNT = "registration_count"
    DUPLICATE_REGISTRATION_COUNT = "duplicate_registration_count"
    DISABLED_BY_PREDICATE_COUNT = "disabled_by_predicate_count"

    @property
    def is_timer(self) -> bool:
        return self.value.endswith("_ms")


class StatsTracker:
    """
    Collects bootstrap statistics.

    Timers accumulate: starting and stopping the same timer twice
    sums both intervals.
    """

    def __init__(self) -> None:
        self._values: Dict[Stat, float] = {}
        self._running: Dict[Stat, float] = {}

    def start(self, stat: Stat) -> None:
        self._require_timer(stat)
        if stat in self._running:
            raise ValueError(f"Timer '{stat.value}' is already running.")
        self._running[stat] = time.perf_counter()

    def stop(self, stat: Stat) -> None:
        self._require_timer(stat)
        started = self._running.pop(stat, None)
        if started is None:
            raise ValueError(f"Timer '{stat.value}' was not started.")
        elapsed_ms = (time.perf_counter() - started) * 1000
        self._values[stat] = self._values.get(stat, 0.0) + elapsed_ms

    @contextmanager
    def timer(self, stat: Stat) -> Iterator[None]:
        self.start(stat)
        try:
            yield
        finally:
            self.stop(stat)

    def count(self, stat: Stat, amount: int = 1) -> None:
        if stat.is_timer:
            raise ValueError(f"'{stat.value}' is a timer, not a counter.")
        self._values[stat] = self._values.get(stat, 0) + amount

    def value(self, stat: Stat) -> float:
        return self._values.get(stat, 0)

    def summary(self) -> Dict[str, Any]:
        return {
            stat.value: round(value, 3) if stat.is_timer else value
            for stat, value in self._values.items()
        }

    @staticmethod
    def _require_timer(stat: Stat) -> None:
        if not stat.is_timer:
            raise ValueError(f"'{stat.value}' is a counter, not a timer.")
