from __future__ import annotations

from typing import Iterable, NamedTuple, Tuple


class BoundingBox(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2.0, self.y + self.height / 2.0

    @classmethod
    def of(cls, values: Iterable) -> 'BoundingBox':
        x, y, w, h = (int(v) for v in values)
        return cls(x, y, w, h)


class Circle(NamedTuple):
    cx: float
    cy: float
    radius: float

    def bounding_box(self, width: int, height: int) -> BoundingBox:
        """Square around the circle, clamped to a width x height image."""
        x1 = max(0, int(round(self.cx - self.radius)))
        y1 = max(0, int(round(self.cy - self.radius)))
        x2 = min(width, int(round(self.cx + self.radius)))
        y2 = min(height, int(round(self.cy + self.radius)))
        return BoundingBox(x1, y1, max(0, x2 - x1), max(0, y2 - y1))


def by_area(box: BoundingBox) -> int:
    return box.area


def by_x(box: BoundingBox) -> int:
    return box.x


def squared_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def crop(image, box: BoundingBox):
    """Read-only copy of the pixels under ``box``."""
    sub = image[box.y:box.y + box.height, box.x:box.x + box.width].copy()
    sub.flags.writeable = False
    return sub
