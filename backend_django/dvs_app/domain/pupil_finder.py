from __future__ import annotations

import logging
from typing import Optional

import cv2
import numpy as np

from .errors import PupilNotFound
from .geometry import Circle
from .tuning import PupilFinderConfig
from .white_dot import to_gray

logger = logging.getLogger(__name__)


def find_pupil(eye_image: np.ndarray, config: Optional[PupilFinderConfig] = None) -> Circle:
    """Locate the pupil disc in an eye crop with a Hough circle transform.

    The strongest circle wins.
    """
    cfg = config or PupilFinderConfig()
    gray = to_gray(eye_image)
    h, w = gray.shape
    side = min(h, w)
    blur = cv2.medianBlur(np.ascontiguousarray(gray), cfg.blur_kernel)
    min_r = max(3, int(side * cfg.min_radius_ratio))
    max_r = max(min_r + 2, int(side * cfg.max_radius_ratio))
    circles = cv2.HoughCircles(blur, cv2.HOUGH_GRADIENT, dp=cfg.dp, minDist=max(1, int(side * 0.4)),
                               param1=cfg.param1, param2=cfg.param2, minRadius=min_r, maxRadius=max_r)
    if circles is None or len(circles) == 0 or len(circles[0]) == 0:
        logger.error("No pupil circle found in eye image of size %dx%d", w, h)
        raise PupilNotFound(f"no pupil circle in {w}x{h} eye image")
    x_c, y_c, r_c = (float(v) for v in circles[0][0])
    logger.info("Detected pupil at (%.1f, %.1f) r=%.1f", x_c, y_c, r_c)
    return Circle(x_c, y_c, r_c)
