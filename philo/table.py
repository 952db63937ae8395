"""Shared dinner state: thinkers, forks, clock and synchronised output."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, TextIO

from .parsing import SimulationConfig

_POLL_INTERVAL = 0.0005


def current_timestamp() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class MealState(NamedTuple):
    """A consistent view of a thinker's meal bookkeeping."""

    last_meal: int
    meals_count: int


@dataclass(eq=False)
class Thinker:
    """One seat at the table, holding references to its two forks."""

    position: int
    first_fork: threading.Lock
    second_fork: threading.Lock
    last_meal: int = field(default_factory=current_timestamp)
    meals_count: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def start_meal(self, counting: bool) -> int:
        """Record the start of a meal; count it if meals are being tracked."""
        with self._lock:
            self.last_meal = current_timestamp()
            if counting:
                self.meals_count += 1
            return self.last_meal

    def snapshot(self) -> MealState:
        """Return the last meal time and meal count read under the lock."""
        with self._lock:
            return MealState(self.last_meal, self.meals_count)


class DiningTable:
    """Holds the configuration, the thinkers and the forks between them."""

    def __init__(self, config: SimulationConfig, stream: Optional[TextIO] = None) -> None:
        self.config = config
        self.stream = stream if stream is not None else sys.stdout
        self._stopped = threading.Event()
        self._output_lock = threading.Lock()
        count = config.thinker_count
        self.forks = [threading.Lock() for _ in range(count)]
        self.start_time = current_timestamp()
        self.thinkers = [
            Thinker(
                position=index + 1,
                first_fork=self.forks[index],
                second_fork=self.forks[(index + 1) % count],
            )
            for index in range(count)
        ]

    def elapsed(self) -> int:
        """Milliseconds since the dinner started."""
        return current_timestamp() - self.start_time

    def is_active(self) -> bool:
        """True while the dinner is still in progress."""
        return not self._stopped.is_set()

    def stop(self) -> None:
        """End the dinner; idempotent."""
        self._stopped.set()

    def display(self, position: int, action: str) -> bool:
        """Print a timestamped action line; return whether it was printed.

        Once the dinner has ended only "died" messages are still printed.
        """
        active = self.is_active()
        with self._output_lock:
            if not (active or action == "died"):
                return False
            self.stream.write(f"{self.elapsed()} {position} {action}\n")
            self.stream.flush()
            return True

    def precise_sleep(self, milliseconds: int) -> None:
        """Sleep for the given time, returning early if the dinner ends."""
        start = self.elapsed()
        while self.is_active():
            if self.elapsed() - start >= milliseconds:
                break
            self._stopped.wait(_POLL_INTERVAL)