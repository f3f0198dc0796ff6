"""
SVG 文档
解析 SVG 根节点尺寸，并将文档绘制为 PNG
"""
import math
from dataclasses import dataclass
from typing import Optional

import cairosvg
from cairosvg.parser import Tree

from ...utils import regex_patterns as patterns

# CSS 像素基准（与 dpi 无关）
CSS_PX_PER_INCH = 96.0

DEFAULT_EM_SIZE = 16.0


def round_half_up(value: float) -> int:
    """四舍五入（.5 远离零）"""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def parse_length(text: Optional[str], em_size: float = DEFAULT_EM_SIZE) -> Optional[float]:
    """将 SVG 长度转换为 CSS 像素，无法换算时返回None"""
    if not text:
        return None
    match = patterns.SVG_LENGTH.match(text)
    if not match:
        return None

    value = float(match.group(1))
    unit = match.group(2).lower()
    factors = {
        "": 1.0,
        "px": 1.0,
        "em": em_size,
        "ex": em_size / 2,
        "pt": CSS_PX_PER_INCH / 72,
        "pc": CSS_PX_PER_INCH / 6,
        "in": CSS_PX_PER_INCH,
        "cm": CSS_PX_PER_INCH / 2.54,
        "mm": CSS_PX_PER_INCH / 25.4,
    }
    if unit not in factors:
        return None
    return value * factors[unit]


def parse_viewbox(text: Optional[str]) -> Optional[tuple[float, float, float, float]]:
    if not text:
        return None
    parts = [p for p in patterns.SVG_VIEWBOX_SEPARATOR.split(text.strip()) if p]
    if len(parts) != 4:
        return None
    return tuple(float(p) for p in parts)


@dataclass
class VectorDocument:
    """SVG 文档

    width/height 为 CSS 像素，可修改；ppi 为输出分辨率标记。
    """

    source: str
    width: float
    height: float
    ppi: int = 96

    @classmethod
    def parse(cls, svg: str, em_size: float = DEFAULT_EM_SIZE) -> "VectorDocument":
        """解析 SVG 文本

        Raises:
            ValueError: 无法确定文档尺寸
        """
        tree = Tree(bytestring=svg.encode("utf-8"))
        viewbox = parse_viewbox(tree.get("viewBox"))

        width = parse_length(tree.get("width"), em_size)
        height = parse_length(tree.get("height"), em_size)
        if width is None and viewbox:
            width = viewbox[2]
        if height is None and viewbox:
            height = viewbox[3]
        if width is None or height is None:
            raise ValueError("无法确定 SVG 文档尺寸")

        return cls(source=svg, width=width, height=height)

    @property
    def pixel_size(self) -> tuple[int, int]:
        return round_half_up(self.width), round_half_up(self.height)

    def paint(self) -> bytes:
        """按当前尺寸绘制为透明背景 PNG"""
        width, height = self.pixel_size
        return cairosvg.svg2png(
            bytestring=self.source.encode("utf-8"),
            output_width=width,
            output_height=height,
            dpi=self.ppi,
        )
