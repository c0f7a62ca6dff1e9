"""Compute-once gate for the lazily derived fields of Photo, Eye and Pupil."""

from __future__ import annotations

import enum
import threading
from typing import Callable, Generic, Optional, TypeVar

from .errors import InvariantViolation

T = TypeVar('T')


class GateState(enum.Enum):
    UNCOMPUTED = 'uncomputed'
    COMPUTING = 'computing'
    DONE = 'done'
    FAILED = 'failed'


class ComputeOnce(Generic[T]):
    """Runs ``factory`` at most once and replays its result or its failure.

    Concurrent callers block on the lock until the first computation ends.
    A failure is cached like a value: it is re-raised, never retried.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.RLock()
        self._state = GateState.UNCOMPUTED
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None

    @property
    def state(self) -> GateState:
        return self._state

    def get(self) -> T:
        with self._lock:
            if self._state is GateState.DONE:
                return self._value  # type: ignore[return-value]
            if self._state is GateState.FAILED:
                raise self._error  # type: ignore[misc]
            if self._state is GateState.COMPUTING:
                raise InvariantViolation("re-entrant access to a value that is still being computed")
            self._state = GateState.COMPUTING
            try:
                value = self._factory()
            except Exception as e:
                self._error = e
                self._state = GateState.FAILED
                raise
            except BaseException:
                # interrupted, not failed: the next caller computes again
                self._state = GateState.UNCOMPUTED
                raise
            self._value = value
            self._state = GateState.DONE
            return value
