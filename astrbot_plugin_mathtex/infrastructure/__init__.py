"""
基础设施层
"""
from .converter import (
    InputSanitizer,
    OptionEncoder,
    ErrorDetector,
)
from .engine import PlaywrightScriptEngine, TypesetEngine
from .raster import PixelBuffer, Rasterizer, VectorDocument

__all__ = [
    "InputSanitizer",
    "OptionEncoder",
    "ErrorDetector",
    "PlaywrightScriptEngine",
    "TypesetEngine",
    "PixelBuffer",
    "Rasterizer",
    "VectorDocument",
]
