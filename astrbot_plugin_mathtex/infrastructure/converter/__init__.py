"""
基础设施层 - 转换器模块
"""
from .input_sanitizer import InputSanitizer
from .option_encoder import OptionEncoder
from .error_detector import ErrorDetector, ERROR_MARKER

__all__ = [
    "InputSanitizer",
    "OptionEncoder",
    "ErrorDetector",
    "ERROR_MARKER",
]
