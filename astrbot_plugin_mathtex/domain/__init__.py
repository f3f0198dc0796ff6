"""
领域层 - 核心接口和错误定义
"""

from .interfaces import (
    IScriptEngine,
    IRasterizer,
)
from .errors import (
    ErrorCode,
    MathTexError,
    EngineNotReadyError,
    EngineLoadError,
    EmptyFormulaError,
    TypesetError,
    RenderError,
    InvalidOptionsError,
)

__all__ = [
    "IScriptEngine",
    "IRasterizer",
    "ErrorCode",
    "MathTexError",
    "EngineNotReadyError",
    "EngineLoadError",
    "EmptyFormulaError",
    "TypesetError",
    "RenderError",
    "InvalidOptionsError",
]
