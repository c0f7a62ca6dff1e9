from __future__ import annotations

import enum
import logging
import threading
from typing import Optional

from .errors import AccumulatorClosed

logger = logging.getLogger(__name__)


class AccumulatorState(enum.Enum):
    EMPTY = 'empty'
    FIRST_SAMPLE = 'first_sample'
    FINAL = 'final'


class PupillaryDistance:
    """Two-sample reducer: |x_first - x_second| once both pupils reported.

    A third sample would be a raw coordinate mixed with a distance, so it is
    rejected and the final value is kept.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = AccumulatorState.EMPTY
        self._first: Optional[float] = None
        self._distance: Optional[float] = None

    @property
    def state(self) -> AccumulatorState:
        return self._state

    @property
    def value(self) -> Optional[float]:
        """The final distance, or None until two samples were appended."""
        return self._distance

    def append_pupil_x(self, pupil_x: float) -> None:
        with self._lock:
            if self._state is AccumulatorState.EMPTY:
                self._first = float(pupil_x)
                self._state = AccumulatorState.FIRST_SAMPLE
            elif self._state is AccumulatorState.FIRST_SAMPLE:
                self._distance = abs(self._first - float(pupil_x))
                self._state = AccumulatorState.FINAL
                logger.info("Pupillary distance: %s", self._distance)
            else:
                logger.error("Rejected pupil sample %s: distance already final (%s)", pupil_x, self._distance)
                raise AccumulatorClosed(
                    f"pupillary distance already computed ({self._distance}); extra sample {pupil_x} rejected"
                )
