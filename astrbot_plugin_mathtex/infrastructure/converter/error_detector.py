"""
错误检测器
从 MathJax 输出中提取内嵌的错误信息
"""

import html
from typing import Optional

ERROR_MARKER = "data-mjx-error"


class ErrorDetector:
    """错误检测器

    MathJax 不抛出公式错误，而是在 SVG 中输出带
    data-mjx-error="..." 属性的元素。
    """

    def __init__(self, marker: str = ERROR_MARKER):
        self._marker = marker

    def detect(self, text: Optional[str]) -> Optional[str]:
        """检测错误

        Returns:
            以句点结尾的错误信息，无错误时返回None
        """
        if not text:
            return None

        index = text.find(self._marker)
        if index < 0:
            return None

        start = text.find('"', index + len(self._marker))
        end = text.find('"', start + 1) if start >= 0 else -1
        if start < 0 or end < 0:
            return "Unknown typeset error."

        message = html.unescape(text[start + 1:end]).strip()
        if not message:
            return "Unknown typeset error."
        return message + "."
