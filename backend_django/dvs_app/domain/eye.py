"""Eye and Pupil entities.

Children keep weak references to their parents: a Photo owns its eyes, an Eye
owns its pupil, never the other way round.
"""

from __future__ import annotations

import enum
import logging
import math
import weakref
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from .geometry import BoundingBox, Circle, crop
from .memo import ComputeOnce
from .pupil_finder import find_pupil
from .tuning import WhiteDotConfig
from .white_dot import WhiteDot, detect_white_dot

if TYPE_CHECKING:
    from .photo import Photo

logger = logging.getLogger(__name__)

PupilFinder = Callable[[np.ndarray], Circle]


class Side(str, enum.Enum):
    LEFT = 'left'
    RIGHT = 'right'


def _deref(ref: 'weakref.ReferenceType', what: str):
    obj = ref()
    if obj is None:
        raise ReferenceError(f"owning {what} no longer exists")
    return obj


class Eye:
    def __init__(
        self,
        photo: 'Photo',
        image: np.ndarray,
        box: BoundingBox,
        side: Side,
        pupil_finder: Optional[PupilFinder] = None,
        white_dot_config: Optional[WhiteDotConfig] = None,
    ) -> None:
        self._photo = weakref.ref(photo)
        self.image = image
        self.box = box
        self.side = side
        self._pupil_finder = pupil_finder or find_pupil
        self._white_dot_config = white_dot_config
        self._pupil: ComputeOnce[Pupil] = ComputeOnce(self._find_pupil)

    def __repr__(self) -> str:
        return f"Eye(side={self.side.value}, box={tuple(self.box)})"

    @property
    def photo(self) -> 'Photo':
        return _deref(self._photo, 'photo')

    @property
    def pupil(self) -> 'Pupil':
        return self._pupil.get()

    def _find_pupil(self) -> 'Pupil':
        circle = self._pupil_finder(self.image)
        h, w = self.image.shape[:2]
        area = circle.bounding_box(w, h)
        pupil = Pupil(self, crop(self.image, area), circle, self._white_dot_config)
        # eye boxes share the eye-search-region frame, so x offsets are comparable
        self.photo.append_pupil_x(self.box.x + circle.cx)
        return pupil


class Pupil:
    def __init__(
        self,
        eye: Eye,
        image: np.ndarray,
        circle: Circle,
        white_dot_config: Optional[WhiteDotConfig] = None,
    ) -> None:
        self._eye = weakref.ref(eye)
        self.image = image
        self.circle = circle
        self._white_dot_config = white_dot_config
        self._white_dot: ComputeOnce[WhiteDot] = ComputeOnce(self._detect_white_dot)

    @property
    def eye(self) -> Eye:
        return _deref(self._eye, 'eye')

    @property
    def white_dot(self) -> WhiteDot:
        return self._white_dot.get()

    @property
    def area(self) -> float:
        """Disk approximation pi * (width // 2)^2 of the pupil crop.

        This is really the iris-sized detection, only meaningful relative to
        WhiteDot.area which is approximated the same way.
        """
        width = self.image.shape[1]
        return math.pi * (width // 2) ** 2

    def _detect_white_dot(self) -> WhiteDot:
        return detect_white_dot(self.image, self._white_dot_config)
