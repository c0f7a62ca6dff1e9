from __future__ import annotations

from typing import Any, Protocol


class PhotoStorage(Protocol):
    def save_upload(self, image_file: Any) -> str:
        """Persist an uploaded photo and return a local file path readable by OpenCV.

        Raises ConstructionError when the upload is not a decodable image.
        """
        ...

    def discard(self, path: str) -> None:
        """Remove a file returned by save_upload. Missing files are ignored."""
        ...
