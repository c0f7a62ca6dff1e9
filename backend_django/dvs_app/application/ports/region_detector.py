from __future__ import annotations

from typing import List, Optional, Protocol, Tuple
import numpy as np

from ...domain.detection import DetectionFlags
from ...domain.geometry import BoundingBox


class RegionDetector(Protocol):
    def detect(
        self,
        image: np.ndarray,
        scale_factor: float = 1.1,
        min_neighbors: int = 3,
        flags: DetectionFlags = DetectionFlags.NONE,
        min_size: Optional[Tuple[int, int]] = None,
        max_size: Optional[Tuple[int, int]] = None,
    ) -> List[BoundingBox]:
        """Return candidate boxes in image coordinates, possibly empty.

        With FIND_BIGGEST_OBJECT set, the first box is the largest one.
        """
        ...
