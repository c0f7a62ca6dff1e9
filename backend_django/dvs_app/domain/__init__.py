"""Ocular landmark pipeline: eyes, pupils, corneal reflex and pupillary distance.

This package must not depend on frameworks or adapters.
"""

from .errors import (
    AccumulatorClosed,
    ConstructionError,
    DetectionError,
    InsufficientDetections,
    InvariantViolation,
    NoSuitableCandidate,
    PupilNotFound,
)
from .eye import Eye, Pupil, Side
from .eye_locator import EyeLocator, select_eye_boxes
from .photo import Photo, PhotoType
from .pupillary_distance import PupillaryDistance
from .white_dot import WhiteDot, detect_white_dot
