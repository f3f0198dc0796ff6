"""
MathTex 类型定义
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .domain.errors import ErrorCode, MathTexError
    from .infrastructure.raster.pixel_buffer import PixelBuffer

# CSS 颜色字符串或 RGB/RGBA 元组
Color = Union[str, tuple]

# 缩放下限
MIN_SCALE = 0.01

MATHJAX_CDN = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-svg-full.js"


class EngineState(Enum):
    """排版引擎会话状态"""

    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class TexOptions:
    """MathJax 转换选项（不可变）

    字符串值在序列化时自动加引号，None 值不输出；
    display 未设置时沿用 ConversionRequest.display。
    """

    display: Optional[bool] = None
    em: float = 16
    ex: float = 8
    scale: float = 1.0
    family: str = ""
    container_width: Optional[float] = None
    line_width: Optional[float] = None

    # Python 字段名 -> MathJax 选项名
    _JS_NAMES = {
        "container_width": "containerWidth",
        "line_width": "lineWidth",
    }

    def items(self) -> list[tuple[str, object]]:
        """按声明顺序返回 (MathJax选项名, 值)"""
        result = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "":
                continue
            result.append((self._JS_NAMES.get(f.name, f.name), value))
        return result


@dataclass(frozen=True)
class ConversionRequest:
    """转换请求

    options 可以是 TexOptions、映射，或 (名称, 字面量) 序列；
    序列中的字面量原样输出，字符串需调用方自行加引号。
    """

    formula: str
    options: object = None
    display: bool = True


@dataclass(frozen=True)
class RasterSpec:
    """栅格化参数（不可变）"""

    scale: float = 1.0
    dpi: int = 300
    background: Optional[Color] = None

    def __post_init__(self):
        if not isinstance(self.scale, (int, float)) or self.scale < MIN_SCALE:
            raise ValueError(f"scale 必须不小于 {MIN_SCALE}: {self.scale!r}")
        if isinstance(self.dpi, bool) or not isinstance(self.dpi, int) or self.dpi <= 0:
            raise ValueError(f"dpi 必须为正整数: {self.dpi!r}")


@dataclass(frozen=True)
class EngineConfig:
    """排版引擎配置（不可变）"""

    mathjax_source: str = MATHJAX_CDN
    dom_shim_source: Optional[str] = None
    headless: bool = True
    browser_args: tuple[str, ...] = (
        "--disable-web-security",
        "--allow-file-access-from-files",
    )


@dataclass(frozen=True)
class RenderConfig:
    """渲染配置（不可变）"""

    scale: float = 1.0
    dpi: int = 300
    background_color: str = ""
    render_timeout: int = 30000


@dataclass
class ConversionResult:
    """转换结果"""

    success: bool
    svg: Optional[str] = None
    mathml: Optional[str] = None
    error_message: Optional[str] = None
    error_code: Optional["ErrorCode"] = None

    @classmethod
    def ok(cls, svg: str, mathml: Optional[str] = None) -> "ConversionResult":
        return cls(success=True, svg=svg, mathml=mathml)

    @classmethod
    def fail(cls, error: "MathTexError") -> "ConversionResult":
        return cls(success=False, error_message=str(error), error_code=error.code)


@dataclass
class RenderResult:
    """渲染结果"""

    success: bool
    image: Optional["PixelBuffer"] = None
    svg: Optional[str] = None
    error_message: Optional[str] = None
    error_code: Optional["ErrorCode"] = None
