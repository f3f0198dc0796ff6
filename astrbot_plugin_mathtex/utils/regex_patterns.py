"""
正则表达式模式集中管理模块

本模块集中定义和预编译所有正则表达式，按使用模块分组，
命名规范为全大写+下划线。
"""

import re
from typing import Pattern

# ============================================================================
# 输入清洗相关正则 (input_sanitizer.py)
# ============================================================================

# 匹配回车/换行字符（每个字符单独替换为空格）
SANITIZE_LINE_BREAK: Pattern[str] = re.compile(r"[\r\n]")

# 匹配反斜杠
SANITIZE_BACKSLASH: Pattern[str] = re.compile(r"\\")

# 匹配双引号
SANITIZE_DOUBLE_QUOTE: Pattern[str] = re.compile(r'"')

# 匹配空白字符串
SANITIZE_BLANK: Pattern[str] = re.compile(r"^\s*$")


# ============================================================================
# 选项编码相关正则 (option_encoder.py)
# ============================================================================

# 合法的 JS 对象键名
OPTION_NAME: Pattern[str] = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


# ============================================================================
# SVG 文档相关正则 (vector_document.py)
# ============================================================================

# 匹配带单位的长度，如 5.254ex、12px、1e2pt
SVG_LENGTH: Pattern[str] = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([a-zA-Z%]*)\s*$"
)

# viewBox 分隔符（空白或逗号）
SVG_VIEWBOX_SEPARATOR: Pattern[str] = re.compile(r"[\s,]+")
