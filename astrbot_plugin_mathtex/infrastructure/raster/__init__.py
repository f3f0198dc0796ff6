"""
基础设施层 - 栅格化模块
"""
from .pixel_buffer import PixelBuffer
from .rasterizer import Rasterizer, VERTICAL_PADDING, to_rgba
from .vector_document import VectorDocument, parse_length, round_half_up

__all__ = [
    "PixelBuffer",
    "Rasterizer",
    "VERTICAL_PADDING",
    "to_rgba",
    "VectorDocument",
    "parse_length",
    "round_half_up",
]
