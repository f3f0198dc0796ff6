"""
工具层 - AOP装饰器和通用工具
"""

from .decorators import log_execution, with_timeout
from . import regex_patterns

__all__ = ["log_execution", "with_timeout", "regex_patterns"]
