"""
输入清洗器
将公式文本处理为可安全嵌入 JS 字符串字面量的形式
"""

from ...domain.errors import EmptyFormulaError
from ...utils import regex_patterns as patterns


class InputSanitizer:
    """输入清洗器

    处理顺序：
    1. 去除首尾空白
    2. 每个回车/换行字符替换为一个空格
    3. 反斜杠加倍
    4. 双引号转义

    每次调用只做一遍转义。
    """

    def sanitize(self, text: str) -> str:
        if text is None or patterns.SANITIZE_BLANK.match(text):
            raise EmptyFormulaError()

        text = text.strip()
        text = patterns.SANITIZE_LINE_BREAK.sub(" ", text)
        text = patterns.SANITIZE_BACKSLASH.sub(r"\\\\", text)
        text = patterns.SANITIZE_DOUBLE_QUOTE.sub(r'\\"', text)
        return text
