"""Loading of room images into RGBA pixels and walkable masks."""

from __future__ import annotations

import os

from PIL import Image


class ImageLoadError(RuntimeError):
    """Raised when an image file cannot be read."""


class ImageLoader:
    """An image decoded to RGBA, four bytes per pixel, row by row."""

    def __init__(self, filepath: str | os.PathLike[str]) -> None:
        path = os.fspath(filepath)
        try:
            with Image.open(path) as img:
                rgba = img.convert("RGBA")
        except OSError as exc:
            raise ImageLoadError(f"Failed to load image: {path}") from exc
        self.width, self.height = rgba.size
        self.pixels = rgba.tobytes()

    def is_pixel_opaque(self, x: int, y: int) -> bool:
        """Whether the pixel has non-zero alpha; outside the image is not opaque."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        return self.pixels[(y * self.width + x) * 4 + 3] != 0

    def walkable_mask(self) -> list[bool]:
        """Row-major list: True where the pixel is fully transparent."""
        return [alpha == 0 for alpha in self.pixels[3::4]]