"""
领域层 - 错误类型定义
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """错误代码枚举"""

    ENGINE_NOT_READY = "ENGINE_NOT_READY"
    ENGINE_LOAD_FAILED = "ENGINE_LOAD_FAILED"
    EMPTY_FORMULA = "EMPTY_FORMULA"
    TYPESET_FAILED = "TYPESET_FAILED"
    RENDER_FAILED = "RENDER_FAILED"
    INVALID_OPTIONS = "INVALID_OPTIONS"


class MathTexError(Exception):
    """MathTex 错误基类"""

    def __init__(self, message: str, code: ErrorCode = None):
        super().__init__(message)
        self.code = code


class EngineNotReadyError(MathTexError):
    """引擎未加载或加载失败"""

    def __init__(self, message: str = "排版引擎未加载或加载失败"):
        super().__init__(message, code=ErrorCode.ENGINE_NOT_READY)


class EngineLoadError(MathTexError):
    """引擎加载错误"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, code=ErrorCode.ENGINE_LOAD_FAILED)
        self.cause = cause


class EmptyFormulaError(MathTexError):
    """空公式"""

    def __init__(self, message: str = "公式为空"):
        super().__init__(message, code=ErrorCode.EMPTY_FORMULA)


class TypesetError(MathTexError):
    """排版错误（MathJax 报告的公式错误）"""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.TYPESET_FAILED)


class RenderError(MathTexError):
    """栅格化错误"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, code=ErrorCode.RENDER_FAILED)
        self.cause = cause


class InvalidOptionsError(MathTexError):
    """转换选项无法编码"""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.INVALID_OPTIONS)
