"""
AstrBot MathTex 插件
LaTeX 公式 -> SVG -> 图片
"""
from .application import FormulaService
from .domain.errors import (
    ErrorCode,
    MathTexError,
    EngineNotReadyError,
    EngineLoadError,
    EmptyFormulaError,
    TypesetError,
    RenderError,
    InvalidOptionsError,
)
from .infrastructure import PixelBuffer, Rasterizer, TypesetEngine
from .types import (
    ConversionRequest,
    ConversionResult,
    EngineConfig,
    EngineState,
    RasterSpec,
    RenderConfig,
    RenderResult,
    TexOptions,
)

__all__ = [
    "FormulaService",
    "ErrorCode",
    "MathTexError",
    "EngineNotReadyError",
    "EngineLoadError",
    "EmptyFormulaError",
    "TypesetError",
    "RenderError",
    "InvalidOptionsError",
    "PixelBuffer",
    "Rasterizer",
    "TypesetEngine",
    "ConversionRequest",
    "ConversionResult",
    "EngineConfig",
    "EngineState",
    "RasterSpec",
    "RenderConfig",
    "RenderResult",
    "TexOptions",
]
