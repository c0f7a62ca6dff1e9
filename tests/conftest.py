import threading
import time

import cv2
import numpy as np
import pytest

from dvs_app.domain.detection import DetectionFlags
from dvs_app.domain.eye_locator import EyeLocator
from dvs_app.domain.geometry import BoundingBox, Circle

# Two 60x60 eyes in a 200x300 frame; no face, so boxes are in image coordinates
LEFT_EYE_BOX = (40, 50, 60, 60)
RIGHT_EYE_BOX = (180, 52, 60, 60)


class FakeRegionDetector:
    """Returns canned boxes and records every call."""

    def __init__(self, boxes=(), delay=0.0):
        self.boxes = [BoundingBox.of(b) for b in boxes]
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    @property
    def call_count(self):
        return len(self.calls)

    def detect(self, image, scale_factor=1.1, min_neighbors=3, flags=DetectionFlags.NONE,
               min_size=None, max_size=None):
        with self._lock:
            self.calls.append({
                'shape': image.shape,
                'scale_factor': scale_factor,
                'min_neighbors': min_neighbors,
                'flags': flags,
                'min_size': min_size,
                'max_size': max_size,
            })
        if self.delay:
            time.sleep(self.delay)
        return list(self.boxes)


def centered_pupil(eye_image):
    h, w = eye_image.shape[:2]
    return Circle(w / 2.0, h / 2.0, min(h, w) / 4.0)


def draw_reflexes(image, offset=(5, 0), radius=3):
    """Paint a white dot `offset` pixels away from the centre of each eye box."""
    for x, y, w, h in (LEFT_EYE_BOX, RIGHT_EYE_BOX):
        cx = x + w // 2 + offset[0]
        cy = y + h // 2 + offset[1]
        cv2.circle(image, (cx, cy), radius, (255, 255, 255), -1)
    return image


@pytest.fixture
def write_image(tmp_path):
    def _write(image, name='photo.png'):
        path = tmp_path / name
        assert cv2.imwrite(str(path), image)
        return str(path)
    return _write


@pytest.fixture
def face_photo_path(write_image):
    image = np.zeros((200, 300, 3), dtype=np.uint8)
    return write_image(draw_reflexes(image))


@pytest.fixture
def make_locator():
    def _make(face_boxes=(), eye_boxes=(LEFT_EYE_BOX, RIGHT_EYE_BOX), pupil_finder=centered_pupil, delay=0.0):
        face = FakeRegionDetector(face_boxes)
        eyes = FakeRegionDetector(eye_boxes, delay=delay)
        locator = EyeLocator(face, eyes, pupil_finder=pupil_finder)
        return locator, face, eyes
    return _make
