"""
基础设施层 - 排版引擎模块
"""
from .script_engine import PlaywrightScriptEngine, ScriptExecutionError
from .typeset_engine import TypesetEngine

__all__ = [
    "PlaywrightScriptEngine",
    "ScriptExecutionError",
    "TypesetEngine",
]
