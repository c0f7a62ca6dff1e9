from __future__ import annotations

import enum
import logging
import os
from typing import TYPE_CHECKING, Optional, Tuple

import cv2
import numpy as np

from .errors import ConstructionError
from .eye import Eye
from .memo import ComputeOnce
from .pupillary_distance import PupillaryDistance

if TYPE_CHECKING:
    from .eye_locator import EyeLocator

logger = logging.getLogger(__name__)


class PhotoType(str, enum.Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'


def load_image(path: str) -> np.ndarray:
    if not path or not os.path.isfile(path):
        raise ConstructionError(f"Invalid file specified: {path}")
    image = cv2.imread(path)
    if image is None:
        raise ConstructionError(f"Unreadable image: {path}")
    image.flags.writeable = False
    return image


class Photo:
    """A patient photograph and the landmarks derived from it.

    The eye pair is located once, on first access; a failure to locate it is
    cached and re-raised as well.
    """

    def __init__(self, path: str, orientation: PhotoType = PhotoType.HORIZONTAL, *, locator: 'EyeLocator') -> None:
        self.path = path
        self.orientation = PhotoType(orientation)
        self.image = load_image(path)
        self._locator = locator
        self._eyes: ComputeOnce[Tuple[Eye, Eye]] = ComputeOnce(self._find_eyes)
        self._pupillary = PupillaryDistance()

    def __repr__(self) -> str:
        return f"Photo(path={self.path!r}, orientation={self.orientation.value})"

    @property
    def eyes(self) -> Tuple[Eye, Eye]:
        return self._eyes.get()

    @property
    def left_eye(self) -> Eye:
        return self.eyes[0]

    @property
    def right_eye(self) -> Eye:
        return self.eyes[1]

    @property
    def pupillary_distance(self) -> Optional[float]:
        """Distance between the two pupils' x positions.

        Locates both pupils if needed; each pupil reports itself once.
        """
        for eye in self.eyes:
            _ = eye.pupil
        return self._pupillary.value

    def append_pupil_x(self, pupil_x: float) -> None:
        """Called by an Eye once its pupil is found."""
        self._pupillary.append_pupil_x(pupil_x)

    def _find_eyes(self) -> Tuple[Eye, Eye]:
        return self._locator.locate(self)
