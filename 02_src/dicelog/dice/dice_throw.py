"""DiceThrow: a tiny library that reports its throw count as events."""

import random
import threading
from dataclasses import dataclass

from ..channel import EventSource
from ..config import DEFAULT_BATCH_SIZE


@dataclass(frozen=True)
class DiceThrowResult:
    """Outcome of throwing two dice."""

    first_die: int
    second_die: int

    @property
    def total(self) -> int:
        return self.first_die + self.second_die


class DiceThrow:
    """Throws two six-sided dice and publishes a summary every batch."""

    def __init__(
        self,
        source: EventSource,
        rng: random.Random | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self._source = source
        self._rng = rng or random.Random()
        self._batch_size = batch_size
        self._lock = threading.Lock()
        self._counter = 0
        self._total_counter = 0

    @property
    def total_throws(self) -> int:
        """Throws accounted for by published batches."""
        return self._total_counter

    @property
    def pending_throws(self) -> int:
        """Throws since the last published batch."""
        return self._counter

    def get_dice_throw(self) -> DiceThrowResult:
        """Throw two dice. Totals range from 2 to 12."""
        result = DiceThrowResult(self._roll_a_die(), self._roll_a_die())

        with self._lock:
            self._counter += 1
            if self._counter == self._batch_size:
                # The batch is reported one higher than its size
                self._total_counter += self._counter + 1
                self._source.info(
                    f"{self._source.name} has generated "
                    f"{self._total_counter} total throws this run."
                )
                self._counter = 0

        return result

    def _roll_a_die(self) -> int:
        return self._rng.randint(1, 6)

    def divide_by_zero(self) -> int:
        """Raise ZeroDivisionError for the caller to handle (or not)."""
        x = 10
        y = 0
        return x // y
