"""
选项编码器
将转换选项编码为 MathJax 调用所需的 JS 对象字面量
"""

import json
import math
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from ...domain.errors import InvalidOptionsError
from ...types import TexOptions
from ...utils import regex_patterns as patterns


class OptionEncoder:
    """选项编码器

    支持三种输入：
    - TexOptions: 类型化选项，字符串自动加引号
    - Mapping: 值按 Python 类型编码
    - (名称, 字面量) 序列: 字面量原样输出，字符串需调用方自行加引号

    同名选项后者覆盖前者，位置保留首次出现处。
    """

    def encode(self, options: Any = None, display: Optional[bool] = None) -> str:
        """编码为 {name1:value1,name2:value2} 形式

        Args:
            options: 转换选项
            display: 显示模式默认值，options 中的 display 优先

        Raises:
            InvalidOptionsError: 选项名不是合法标识符，或值无法编码
        """
        pairs: list[tuple[str, str]] = []
        if display is not None:
            pairs.append(("display", self.encode_value(display)))

        if isinstance(options, (TexOptions, Mapping)):
            pairs.extend((k, self.encode_value(v)) for k, v in options.items())
        elif options is not None:
            try:
                pairs.extend((name, str(literal)) for name, literal in options)
            except (TypeError, ValueError) as e:
                raise InvalidOptionsError(f"选项必须是 (名称, 字面量) 序列: {e}") from e

        merged = self._merge(pairs)
        body = ",".join(f"{name}:{value}" for name, value in merged.items())
        return "{" + body + "}"

    def encode_value(self, value: Any) -> str:
        """将 Python 值编码为 JS 字面量"""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidOptionsError(f"选项值必须是有限数: {value!r}")
            return repr(value)
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, Mapping):
            return self.encode(value)
        raise InvalidOptionsError(f"不支持的选项值类型: {type(value).__name__}")

    def _merge(self, pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
        merged: dict[str, str] = {}
        for name, value in pairs:
            if not isinstance(name, str) or not patterns.OPTION_NAME.match(name):
                raise InvalidOptionsError(f"非法的选项名: {name!r}")
            merged[name] = value
        return merged
