"""Corneal light reflex ("white dot") detection inside a pupil crop.

The reflex is the bright blob whose bounding-box centre is closest to the
centre of the pupil image and whose contour area lies in a fixed band.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import cv2
import numpy as np

from .errors import InvariantViolation, NoSuitableCandidate
from .geometry import BoundingBox, squared_distance
from .tuning import WhiteDotConfig

logger = logging.getLogger(__name__)

WHITE = 255


@dataclass(frozen=True)
class WhiteDot:
    distance: float
    area: float
    angle: float

    @property
    def angle_degrees(self) -> float:
        return math.degrees(self.angle)


@dataclass(frozen=True)
class ReflexCandidate:
    contour: np.ndarray
    box: BoundingBox
    distance_sq: float
    area: float


def to_gray(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return image
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)


def binarize(gray: np.ndarray, cutoff: int) -> np.ndarray:
    """Pixels >= cutoff become WHITE, everything else 0."""
    _, bw = cv2.threshold(gray, cutoff - 1, WHITE, cv2.THRESH_BINARY)
    return bw


def find_contours(binary: np.ndarray) -> List[np.ndarray]:
    cnts, _ = cv2.findContours(binary.copy(), cv2.RETR_LIST, cv2.CHAIN_APPROX_NONE)
    return list(cnts)


def image_center(image: np.ndarray) -> Tuple[float, float]:
    h, w = image.shape[:2]
    return w / 2.0, h / 2.0


def in_area_band(area: float, min_area: float, max_area: float) -> bool:
    return min_area <= area <= max_area


def rank_candidates(contours: Sequence[np.ndarray], reference: Tuple[float, float]) -> List[ReflexCandidate]:
    """Contours ordered by squared distance of their box centre to ``reference``.

    Equal distances keep contour order.
    """
    ranked = []
    for c in contours:
        box = BoundingBox.of(cv2.boundingRect(c))
        ranked.append(ReflexCandidate(
            contour=c,
            box=box,
            distance_sq=squared_distance(reference, box.center),
            area=float(cv2.contourArea(c)),
        ))
    ranked.sort(key=lambda cand: cand.distance_sq)
    return ranked


def pick_reflex(
    contours: Sequence[np.ndarray],
    reference: Tuple[float, float],
    min_area: float,
    max_area: float,
) -> ReflexCandidate:
    for cand in rank_candidates(contours, reference):
        logger.info("whiteDot distance^2: %s, area: %s", cand.distance_sq, cand.area)
        if not in_area_band(cand.area, min_area, max_area):
            continue
        logger.info("selected candidate with area: %s", cand.area)
        return cand
    logger.error("[WhiteDot Detection] Unable to find suitable white dot among %d contours", len(contours))
    raise NoSuitableCandidate(
        f"no contour with area in [{min_area}, {max_area}] among {len(contours)} candidates"
    )


def reflex_angle(dx: float, distance: float) -> float:
    """Angle in [0, pi] between the x axis and the reference->reflex vector.

    arccos cannot tell above from below the reference point.
    """
    if abs(dx) > distance:
        logger.error("[WhiteDot Detection] unfulfilled invariant: adjacent edge of triangle is bigger than hypotenuse")
        raise InvariantViolation(f"|dx|={abs(dx)} exceeds distance={distance}")
    if distance == 0:
        return 0.0
    return math.acos(dx / distance)


def measure(cand: ReflexCandidate, reference: Tuple[float, float]) -> WhiteDot:
    # disk approximation from the truncated half width, matching Pupil.area
    area = math.pi * (cand.box.width // 2) ** 2
    cx, cy = cand.box.center
    distance = math.hypot(cx - reference[0], cy - reference[1])
    dx = cx - reference[0]
    logger.info("[WhiteDot Detection] Computing angle for xDist: %s, dist: %s", dx, distance)
    angle = reflex_angle(dx, distance)
    logger.info(
        "[WhiteDot Detection] computed white dot with distance: %s, angle: %s, area: %s",
        distance, math.degrees(angle), area,
    )
    return WhiteDot(distance=distance, area=area, angle=angle)


def detect_white_dot(pupil_image: np.ndarray, config: Optional[WhiteDotConfig] = None) -> WhiteDot:
    cfg = config or WhiteDotConfig()
    gray = to_gray(pupil_image)
    binary = binarize(gray, cfg.threshold)
    contours = find_contours(binary)
    if not contours:
        logger.error("No contours found for this pupil.")
        raise NoSuitableCandidate("no bright contour found in pupil image")
    reference = image_center(pupil_image)
    cand = pick_reflex(contours, reference, cfg.min_area, cfg.max_area)
    return measure(cand, reference)
