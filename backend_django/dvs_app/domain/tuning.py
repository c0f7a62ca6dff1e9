"""Detection tunables.

Values come from environment variables so they can be re-tuned per capture
resolution without code changes. Area bounds are in pixels^2 of the pupil crop.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _getf(env_name: str, default: float) -> float:
	try:
		return float(os.getenv(env_name, str(default)))
	except Exception:
		return default


def _geti(env_name: str, default: int) -> int:
	try:
		return int(float(os.getenv(env_name, str(default))))
	except Exception:
		return default


@dataclass(frozen=True)
class WhiteDotConfig:
	threshold: int = 240
	min_area: float = 10.0
	max_area: float = 200.0

	@classmethod
	def from_env(cls) -> 'WhiteDotConfig':
		return cls(
			threshold=_geti('DVS_WHITE_DOT_THRESHOLD', 240),
			min_area=_getf('DVS_WHITE_DOT_MIN_AREA', 10.0),
			max_area=_getf('DVS_WHITE_DOT_MAX_AREA', 200.0),
		)


@dataclass(frozen=True)
class PupilFinderConfig:
	blur_kernel: int = 5
	dp: float = 1.2
	param1: float = 60.0
	param2: float = 20.0
	min_radius_ratio: float = 0.10
	max_radius_ratio: float = 0.45

	@classmethod
	def from_env(cls) -> 'PupilFinderConfig':
		return cls(param2=_getf('DVS_PUPIL_HOUGH_PARAM2', 20.0))


@dataclass(frozen=True)
class EyeLocatorConfig:
	face_scale_factor: float = 1.05
	face_min_neighbors: int = 2
	face_min_size: int = 30

	@classmethod
	def from_env(cls) -> 'EyeLocatorConfig':
		return cls(
			face_scale_factor=_getf('DVS_FACE_SCALE_FACTOR', 1.05),
			face_min_neighbors=_geti('DVS_FACE_MIN_NEIGHBORS', 2),
		)
