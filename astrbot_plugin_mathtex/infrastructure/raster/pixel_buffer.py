"""
像素缓冲区
"""
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import Image


@dataclass
class PixelBuffer:
    """RGBA 像素缓冲区，带 dpi 标记"""

    image: Image.Image
    dpi: int

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def getpixel(self, xy: tuple[int, int]) -> tuple[int, int, int, int]:
        return self.image.getpixel(xy)

    def to_png_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format="PNG", dpi=(self.dpi, self.dpi))
        return buf.getvalue()

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self.image.save(path, format="PNG", dpi=(self.dpi, self.dpi))
        return path
