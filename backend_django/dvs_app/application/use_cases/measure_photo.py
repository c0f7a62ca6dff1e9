from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ...domain.errors import DetectionError
from ...domain.eye import Eye
from ...domain.eye_locator import EyeLocator
from ...domain.photo import Photo, PhotoType
from ...domain.white_dot import WhiteDot
from ..ports.storage import PhotoStorage

logger = logging.getLogger(__name__)


@dataclass
class EyeMeasurement:
    pupil_area: Optional[float] = None
    white_dot: Optional[WhiteDot] = None
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        wd = None
        if self.white_dot is not None:
            wd = {
                'distance': self.white_dot.distance,
                'area': self.white_dot.area,
                'angle': self.white_dot.angle,
                'angle_degrees': self.white_dot.angle_degrees,
            }
        return {'pupil_area': self.pupil_area, 'white_dot': wd, 'error': self.error}


@dataclass
class PhotoMeasurement:
    orientation: PhotoType
    eyes_found: bool = False
    error: Optional[str] = None
    left: EyeMeasurement = field(default_factory=EyeMeasurement)
    right: EyeMeasurement = field(default_factory=EyeMeasurement)
    pupillary_distance: Optional[float] = None
    duration: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            'orientation': self.orientation.value,
            'eyes_found': self.eyes_found,
            'error': self.error,
            'left_eye': self.left.as_dict(),
            'right_eye': self.right.as_dict(),
            'pupillary_distance': self.pupillary_distance,
            'duration': self.duration,
        }


@dataclass
class MeasurePhotoInput:
    image_path: Optional[str] = None
    image_file: Any = None  # file-like object readable by PIL
    orientation: PhotoType = PhotoType.HORIZONTAL


def _describe(e: DetectionError) -> str:
    return f"{type(e).__name__}: {e}"


def _measure_eye(eye: Eye) -> EyeMeasurement:
    out = EyeMeasurement()
    try:
        pupil = eye.pupil
    except DetectionError as e:
        out.error = _describe(e)
        return out
    out.pupil_area = pupil.area
    try:
        out.white_dot = pupil.white_dot
    except DetectionError as e:
        out.error = _describe(e)
    return out


class MeasurePhoto:
    """Run the landmark pipeline on one photo and collect what could be measured.

    A failed eye pair, pupil or white dot is reported as None plus an error,
    never replaced by a default value.
    """

    def __init__(self, locator: EyeLocator, storage: Optional[PhotoStorage] = None) -> None:
        self.locator = locator
        self.storage = storage

    def _load_photo(self, inp: MeasurePhotoInput) -> Photo:
        # ConstructionError propagates: without a photo there is nothing to report on
        if inp.image_path:
            return Photo(inp.image_path, inp.orientation, locator=self.locator)
        if inp.image_file is None or self.storage is None:
            raise ValueError("either image_path or image_file (with a storage) is required")
        path = self.storage.save_upload(inp.image_file)
        try:
            return Photo(path, inp.orientation, locator=self.locator)
        finally:
            # the pixels are in memory once Photo is built; uploads are not kept
            self.storage.discard(path)

    def execute(self, inp: MeasurePhotoInput) -> PhotoMeasurement:
        start_time = time.time()
        photo = self._load_photo(inp)
        result = PhotoMeasurement(orientation=photo.orientation)

        try:
            left, right = photo.eyes
        except DetectionError as e:
            result.error = _describe(e)
            result.duration = time.time() - start_time
            logger.info("Photo %s cannot be measured: %s", photo.path, result.error)
            return result

        result.eyes_found = True
        result.left = _measure_eye(left)
        result.right = _measure_eye(right)
        if result.left.pupil_area is not None and result.right.pupil_area is not None:
            result.pupillary_distance = photo.pupillary_distance
        result.duration = time.time() - start_time
        return result


class MeasurePatientPhotos:
    """Measure the horizontal and vertical photos taken for one patient."""

    def __init__(self, measure_photo: MeasurePhoto) -> None:
        self.measure_photo = measure_photo

    def execute(self, horizontal: MeasurePhotoInput, vertical: MeasurePhotoInput) -> Dict[PhotoType, PhotoMeasurement]:
        return {
            PhotoType.HORIZONTAL: self.measure_photo.execute(replace(horizontal, orientation=PhotoType.HORIZONTAL)),
            PhotoType.VERTICAL: self.measure_photo.execute(replace(vertical, orientation=PhotoType.VERTICAL)),
        }
