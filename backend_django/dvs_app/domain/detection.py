from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class DetectionFlags(enum.IntFlag):
    """Mode flags understood by region detectors (same bit values as OpenCV)."""
    NONE = 0
    DO_CANNY_PRUNING = 1
    SCALE_IMAGE = 2
    FIND_BIGGEST_OBJECT = 4
    DO_ROUGH_SEARCH = 8


@dataclass(frozen=True)
class DetectionParams:
    """Arguments of a single region-detector call. Defaults match OpenCV's."""
    scale_factor: float = 1.1
    min_neighbors: int = 3
    flags: DetectionFlags = DetectionFlags.NONE
    min_size: Optional[Tuple[int, int]] = None
    max_size: Optional[Tuple[int, int]] = None

    @property
    def biggest_only(self) -> bool:
        return bool(self.flags & DetectionFlags.FIND_BIGGEST_OBJECT)
