from __future__ import annotations

import threading
from functools import partial
from typing import Optional

from ..adapters.detectors.haar_detector import HaarRegionDetector
from ..adapters.storage.file_storage import MediaPhotoStorage
from ..application.use_cases.measure_photo import MeasurePatientPhotos, MeasurePhoto
from ..domain.eye_locator import EyeLocator
from ..domain.pupil_finder import find_pupil
from ..domain.tuning import EyeLocatorConfig, PupilFinderConfig, WhiteDotConfig

_locator_lock = threading.Lock()
_locator: Optional[EyeLocator] = None


def get_eye_locator() -> EyeLocator:
    """Cascades are loaded once per process and shared; detection is read-only."""
    global _locator
    with _locator_lock:
        if _locator is None:
            _locator = EyeLocator(
                face_detector=HaarRegionDetector.for_faces(),
                eye_detector=HaarRegionDetector.for_eyes(),
                config=EyeLocatorConfig.from_env(),
                pupil_finder=partial(find_pupil, config=PupilFinderConfig.from_env()),
                white_dot_config=WhiteDotConfig.from_env(),
            )
        return _locator


def get_measure_photo_use_case() -> MeasurePhoto:
    return MeasurePhoto(locator=get_eye_locator(), storage=MediaPhotoStorage())


def get_measure_patient_use_case() -> MeasurePatientPhotos:
    return MeasurePatientPhotos(get_measure_photo_use_case())
