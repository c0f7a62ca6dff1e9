"""Face-constrained eye localization.

The face box is cut to its upper two thirds before searching for eyes, so
mouth and jaw cannot produce eye candidates. Without a face the whole image is
searched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

import numpy as np

from .detection import DetectionFlags, DetectionParams
from .errors import InsufficientDetections
from .eye import Eye, PupilFinder, Side
from .geometry import BoundingBox, by_area, by_x, crop
from .tuning import EyeLocatorConfig, WhiteDotConfig

if TYPE_CHECKING:
    from ..application.ports.region_detector import RegionDetector
    from .photo import Photo

logger = logging.getLogger(__name__)


def eye_search_region(face: BoundingBox) -> BoundingBox:
    return BoundingBox(face.x, face.y, face.width, (face.height * 2) // 3)


def select_eye_boxes(candidates: Sequence[BoundingBox]) -> Tuple[BoundingBox, BoundingBox]:
    """Pick two eye boxes and return them as (left, right).

    With more than two candidates the two largest win; after the face crop
    the eyes are the most prominent features left. Ties keep detection order.
    """
    if len(candidates) < 2:
        logger.error("Minimum two eyes required, got %d.", len(candidates))
        raise InsufficientDetections(f"need two eye candidates, found {len(candidates)}")
    if len(candidates) > 2:
        ranked = sorted(candidates, key=by_area)
        chosen = [ranked[-1], ranked[-2]]
    else:
        chosen = list(candidates)
    left, right = sorted(chosen, key=by_x)
    return left, right


class EyeLocator:
    def __init__(
        self,
        face_detector: 'RegionDetector',
        eye_detector: 'RegionDetector',
        config: Optional[EyeLocatorConfig] = None,
        pupil_finder: Optional[PupilFinder] = None,
        white_dot_config: Optional[WhiteDotConfig] = None,
    ) -> None:
        self.face_detector = face_detector
        self.eye_detector = eye_detector
        self.config = config or EyeLocatorConfig()
        self.pupil_finder = pupil_finder
        self.white_dot_config = white_dot_config

    def find_face_region(self, image: np.ndarray) -> Optional[BoundingBox]:
        h, w = image.shape[:2]
        cfg = self.config
        params = DetectionParams(
            scale_factor=cfg.face_scale_factor,
            min_neighbors=cfg.face_min_neighbors,
            flags=DetectionFlags.FIND_BIGGEST_OBJECT | DetectionFlags.SCALE_IMAGE,
            min_size=(cfg.face_min_size, cfg.face_min_size),
            max_size=(w, h),
        )
        faces = self.face_detector.detect(
            image,
            scale_factor=params.scale_factor,
            min_neighbors=params.min_neighbors,
            flags=params.flags,
            min_size=params.min_size,
            max_size=params.max_size,
        )
        logger.info("Detected %d faces", len(faces))
        if len(faces) == 0:
            return None
        return eye_search_region(BoundingBox.of(faces[0]))

    def locate(self, photo: 'Photo') -> Tuple[Eye, Eye]:
        image = photo.image
        region_box = self.find_face_region(image)
        region = crop(image, region_box) if region_box is not None else image

        defaults = DetectionParams()
        candidates = self.eye_detector.detect(
            region,
            scale_factor=defaults.scale_factor,
            min_neighbors=defaults.min_neighbors,
            flags=defaults.flags,
            min_size=defaults.min_size,
            max_size=defaults.max_size,
        )
        logger.info("Detected %d eyes for img: %s", len(candidates), photo.path)
        left_box, right_box = select_eye_boxes([BoundingBox.of(c) for c in candidates])

        eyes = []
        for side, box in ((Side.LEFT, left_box), (Side.RIGHT, right_box)):
            eye = Eye(photo, crop(region, box), box, side,
                      pupil_finder=self.pupil_finder, white_dot_config=self.white_dot_config)
            logger.info("created %s eye: %s", side.value, box)
            eyes.append(eye)
        return eyes[0], eyes[1]
