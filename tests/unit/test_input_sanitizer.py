"""
输入清洗器单元测试
"""
import pytest

from astrbot_plugin_mathtex.domain.errors import EmptyFormulaError, ErrorCode
from astrbot_plugin_mathtex.infrastructure.converter import InputSanitizer


@pytest.fixture
def sanitizer():
    return InputSanitizer()


class TestSanitize:
    """清洗流程"""

    def test_trims_whitespace(self, sanitizer):
        assert sanitizer.sanitize("  x^2+1 \t") == "x^2+1"

    def test_each_line_break_becomes_one_space(self, sanitizer):
        assert sanitizer.sanitize("a\r\nb\nc") == "a  b c"

    def test_backslashes_are_doubled(self, sanitizer):
        assert sanitizer.sanitize(r"\frac{a}{b}") == r"\\frac{a}{b}"

    def test_double_quotes_are_escaped(self, sanitizer):
        assert sanitizer.sanitize(r'\text{"hi"}') == r'\\text{\"hi\"}'

    def test_single_escaping_pass_per_call(self, sanitizer):
        once = sanitizer.sanitize(r"\alpha")
        twice = sanitizer.sanitize(once)

        assert once == r"\\alpha"
        assert twice == r"\\\\alpha"

    def test_idempotent_without_backslashes(self, sanitizer):
        once = sanitizer.sanitize("  a +\nb  ")
        assert sanitizer.sanitize(once) == once

    @pytest.mark.parametrize("text", ["", " ", "\t", "\r\n", "   \n  "])
    def test_blank_input_rejected(self, sanitizer, text):
        with pytest.raises(EmptyFormulaError) as exc_info:
            sanitizer.sanitize(text)
        assert exc_info.value.code is ErrorCode.EMPTY_FORMULA

    def test_none_rejected(self, sanitizer):
        with pytest.raises(EmptyFormulaError):
            sanitizer.sanitize(None)
