from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

import cv2
import numpy as np

from ...application.ports.region_detector import RegionDetector
from ...domain.detection import DetectionFlags
from ...domain.errors import ConstructionError
from ...domain.geometry import BoundingBox, by_area

logger = logging.getLogger(__name__)

FACE_CASCADE = 'haarcascade_frontalface_default.xml'
EYE_CASCADE = 'haarcascade_eye.xml'


def default_cascade_path(name: str) -> str:
	return os.path.join(cv2.data.haarcascades, name)


class HaarRegionDetector(RegionDetector):
	"""Region detector backed by an OpenCV Haar cascade."""

	def __init__(self, cascade_path: str) -> None:
		self.cascade_path = cascade_path
		self._cascade = cv2.CascadeClassifier(cascade_path)
		if self._cascade.empty():
			raise ConstructionError(f"Failed to load Haar cascade from {cascade_path}")

	@classmethod
	def for_faces(cls, cascade_path: Optional[str] = None) -> 'HaarRegionDetector':
		return cls(cascade_path or os.getenv('DVS_HAAR_FACE_PATH') or default_cascade_path(FACE_CASCADE))

	@classmethod
	def for_eyes(cls, cascade_path: Optional[str] = None) -> 'HaarRegionDetector':
		return cls(cascade_path or os.getenv('DVS_HAAR_EYE_PATH') or default_cascade_path(EYE_CASCADE))

	def detect(
		self,
		image: np.ndarray,
		scale_factor: float = 1.1,
		min_neighbors: int = 3,
		flags: DetectionFlags = DetectionFlags.NONE,
		min_size: Optional[Tuple[int, int]] = None,
		max_size: Optional[Tuple[int, int]] = None,
	) -> List[BoundingBox]:
		gray = image if image.ndim == 2 else cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
		kwargs = {}
		if min_size:
			kwargs['minSize'] = tuple(int(v) for v in min_size)
		if max_size:
			kwargs['maxSize'] = tuple(int(v) for v in max_size)
		found = self._cascade.detectMultiScale(
			np.ascontiguousarray(gray),
			scaleFactor=float(scale_factor),
			minNeighbors=int(min_neighbors),
			flags=int(flags),
			**kwargs,
		)
		boxes = [BoundingBox.of(b) for b in found]
		# new-style cascades ignore FIND_BIGGEST_OBJECT, so enforce it here
		if boxes and flags & DetectionFlags.FIND_BIGGEST_OBJECT:
			boxes = [max(boxes, key=by_area)]
		logger.debug("%s: %d boxes", os.path.basename(self.cascade_path), len(boxes))
		return boxes
