from __future__ import annotations

import os
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from PIL import Image, UnidentifiedImageError
from django.conf import settings

from ...application.ports.storage import PhotoStorage
from ...domain.errors import ConstructionError


class MediaPhotoStorage(PhotoStorage):
	"""Store uploaded photos on local MEDIA_ROOT as PNG.

	Path: photos/YYYY/MM/<uuid>.png
	"""

	def __init__(self, media_root: Optional[str] = None) -> None:
		self.media_root = media_root

	def _root(self) -> str:
		root = self.media_root or getattr(settings, 'MEDIA_ROOT', None)
		if not root:
			raise ConstructionError("MEDIA_ROOT is not configured")
		return str(root)

	def save_upload(self, image_file: Any) -> str:
		try:
			img = Image.open(image_file)
			img.load()
		except (UnidentifiedImageError, OSError) as e:
			raise ConstructionError(f"Uploaded file is not a readable image: {e}") from e
		if img.mode != 'RGB':
			img = img.convert('RGB')

		now = datetime.now(timezone.utc)
		abs_dir = os.path.join(self._root(), 'photos', f"{now.year:04d}", f"{now.month:02d}")
		os.makedirs(abs_dir, exist_ok=True)
		abs_path = os.path.join(abs_dir, f"{uuid.uuid4().hex}.png")
		img.save(abs_path, format='PNG')
		return abs_path

	def discard(self, path: str) -> None:
		try:
			os.remove(path)
		except FileNotFoundError:
			pass
