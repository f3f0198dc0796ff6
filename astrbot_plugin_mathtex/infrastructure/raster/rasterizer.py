"""
栅格化器
将 SVG 文档按缩放和 dpi 渲染为像素缓冲区
"""
import io
import traceback

from PIL import Image, ImageColor

from astrbot.api import logger
from ...domain.errors import EmptyFormulaError, RenderError
from ...types import Color, RasterSpec
from .pixel_buffer import PixelBuffer
from .vector_document import DEFAULT_EM_SIZE, VectorDocument

# 垂直方向补偿系数，排版结果的上下伸出部分不计入包围盒
VERTICAL_PADDING = 1.05

TRANSPARENT = (0, 0, 0, 0)


def to_rgba(color: Color = None) -> tuple[int, int, int, int]:
    """将颜色统一为 RGBA 元组，None/空串为全透明"""
    if color is None or color == "":
        return TRANSPARENT
    if isinstance(color, str):
        return ImageColor.getcolor(color, "RGBA")
    if len(color) == 3:
        return (*color, 255)
    if len(color) == 4:
        return tuple(color)
    raise ValueError(f"无效的颜色: {color!r}")


class Rasterizer:
    """栅格化器

    无共享状态，可在多个线程中同时调用 render。
    """

    def __init__(self, em_size: float = DEFAULT_EM_SIZE):
        self._em_size = em_size

    def render(self, svg: str, spec: RasterSpec = None) -> PixelBuffer:
        """渲染 SVG

        Raises:
            EmptyFormulaError: 文档为空
            RenderError: 解析或绘制失败
        """
        if not svg:
            raise EmptyFormulaError("SVG 文档为空")
        spec = spec or RasterSpec()

        try:
            document = VectorDocument.parse(svg, em_size=self._em_size)
            document.width *= spec.scale
            document.height *= spec.scale * VERTICAL_PADDING
            document.ppi = spec.dpi

            width, height = document.pixel_size
            if width <= 0 or height <= 0:
                raise ValueError(f"渲染尺寸无效: {width}x{height}")

            buffer = Image.new("RGBA", (width, height), to_rgba(spec.background))
            buffer.info["dpi"] = (spec.dpi, spec.dpi)

            layer = Image.open(io.BytesIO(document.paint())).convert("RGBA")
            if layer.size != buffer.size:
                layer = layer.resize(buffer.size)
            buffer.alpha_composite(layer)
        except Exception as e:
            logger.error(f"[MathTex] 栅格化失败: {type(e).__name__}: {e}")
            logger.debug(f"[MathTex] 堆栈信息:\n{traceback.format_exc()}")
            raise RenderError(f"栅格化失败: {e}", cause=e) from e

        logger.debug(f"[MathTex] 栅格化完成: {width}x{height} @ {spec.dpi}dpi")
        return PixelBuffer(image=buffer, dpi=spec.dpi)
