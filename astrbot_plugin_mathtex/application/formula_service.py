"""
公式服务
编排完整的公式转换与渲染流程
"""
import asyncio
from typing import Any, Optional

from astrbot.api import logger

from ..domain.errors import MathTexError, RenderError
from ..domain.interfaces import IRasterizer
from ..infrastructure.engine import TypesetEngine
from ..infrastructure.raster import Rasterizer
from ..types import (
    Color,
    ConversionRequest,
    ConversionResult,
    EngineConfig,
    RasterSpec,
    RenderResult,
)
from ..utils import log_execution


class FormulaService:
    """
    公式服务

    Pipeline:
    formula ──► sanitize ──► typeset(SVG) ──► rasterize ──► PixelBuffer

    转换和渲染失败以结果对象返回，不抛出异常；
    只有显式调用 load() 时的 EngineLoadError 会向上传播。
    可作为异步上下文管理器使用，退出时释放引擎。
    """

    def __init__(
        self,
        config: EngineConfig = None,
        engine: TypesetEngine = None,
        rasterizer: IRasterizer = None,
    ):
        self._engine = engine or TypesetEngine(config)
        self._rasterizer = rasterizer or Rasterizer()

    async def __aenter__(self) -> "FormulaService":
        await self.load()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.unload_engine()

    @property
    def engine(self) -> TypesetEngine:
        return self._engine

    @property
    def is_loaded(self) -> bool:
        return self._engine.is_loaded

    async def load(self) -> None:
        """加载排版引擎

        Raises:
            EngineLoadError: 引擎加载失败
        """
        await self._engine.load()

    async def unload_engine(self) -> None:
        """释放排版引擎"""
        await self._engine.unload()

    @log_execution
    async def convert_formula_to_vector(
        self, text: str, options: Any = None
    ) -> ConversionResult:
        """LaTeX -> SVG"""
        try:
            svg = await self._engine.convert_to_svg(ConversionRequest(text, options))
            return ConversionResult.ok(svg)
        except MathTexError as e:
            logger.warning(f"[MathTex] 公式转换失败: {e}")
            return ConversionResult.fail(e)

    @log_execution
    async def convert_formula_to_vector_and_markup(
        self, text: str, options: Any = None
    ) -> ConversionResult:
        """LaTeX -> SVG + MathML"""
        try:
            svg, mathml = await self._engine.convert_both(ConversionRequest(text, options))
            return ConversionResult.ok(svg, mathml)
        except MathTexError as e:
            logger.warning(f"[MathTex] 公式转换失败: {e}")
            return ConversionResult.fail(e)

    @log_execution
    async def render_formula_to_image(
        self,
        text: str,
        scale: float = 1.0,
        color: Optional[Color] = None,
        dpi: int = 300,
        options: Any = None,
    ) -> RenderResult:
        """LaTeX -> 图片

        Returns:
            RenderResult，失败时 image 为None；转换成功但栅格化失败时保留 svg
        """
        logger.info(f"[MathTex] 开始渲染公式，长度: {len(text or '')}")

        try:
            spec = RasterSpec(scale=scale, dpi=dpi, background=color)
        except ValueError as e:
            error = RenderError(str(e), cause=e)
            return RenderResult(
                success=False, error_message=str(error), error_code=error.code
            )

        conversion = await self.convert_formula_to_vector(text, options)
        if not conversion.success:
            return RenderResult(
                success=False,
                error_message=conversion.error_message,
                error_code=conversion.error_code,
            )

        try:
            image = await asyncio.to_thread(
                self._rasterizer.render, conversion.svg, spec
            )
        except MathTexError as e:
            return RenderResult(
                success=False,
                svg=conversion.svg,
                error_message=str(e),
                error_code=e.code,
            )

        logger.info(f"[MathTex] 渲染成功: {image.width}x{image.height}")
        return RenderResult(success=True, image=image, svg=conversion.svg)
