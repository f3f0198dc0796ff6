"""
排版引擎
管理 MathJax 引擎会话的生命周期，提供 LaTeX -> SVG / MathML 转换
"""
import asyncio
import traceback
from typing import Callable, Optional

from astrbot.api import logger

from ...domain.errors import (
    EngineLoadError,
    EngineNotReadyError,
    TypesetError,
)
from ...domain.interfaces import IScriptEngine
from ...types import ConversionRequest, EngineConfig, EngineState
from ..converter import ErrorDetector, InputSanitizer, OptionEncoder
from . import mathjax_scripts as scripts
from .script_engine import PlaywrightScriptEngine


class TypesetEngine:
    """
    排版引擎

    状态: UNLOADED ──► LOADING ──► READY | FAILED
    unload() 随时回到 UNLOADED。

    引擎不可重入，load/unload/convert 由同一把锁串行化。
    """

    def __init__(
        self,
        config: EngineConfig = None,
        engine_factory: Callable[[], IScriptEngine] = None,
        sanitizer: InputSanitizer = None,
        encoder: OptionEncoder = None,
        detector: ErrorDetector = None,
    ):
        self._config = config or EngineConfig()
        self._engine_factory = engine_factory or self._default_factory
        self._sanitizer = sanitizer or InputSanitizer()
        self._encoder = encoder or OptionEncoder()
        self._detector = detector or ErrorDetector()

        self._engine: Optional[IScriptEngine] = None
        self._state = EngineState.UNLOADED
        self._lock = asyncio.Lock()

    def _default_factory(self) -> IScriptEngine:
        return PlaywrightScriptEngine(
            headless=self._config.headless,
            browser_args=self._config.browser_args,
        )

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is EngineState.READY

    async def load(self) -> None:
        """加载引擎（幂等）

        Raises:
            EngineLoadError: 引擎创建或脚本执行失败
        """
        async with self._lock:
            if self._state is EngineState.READY:
                return

            self._state = EngineState.LOADING
            logger.info("[MathTex] 正在加载 MathJax 引擎...")
            engine = None
            try:
                engine = self._engine_factory()
                await engine.start()
                await engine.execute(scripts.INIT_SETTINGS)
                await engine.execute_source(self._config.mathjax_source)
                if self._config.dom_shim_source:
                    await engine.execute_source(self._config.dom_shim_source)
                await engine.evaluate(scripts.READY_EXPRESSION)
                await engine.execute(scripts.CONVERT_FUNCTIONS)
            except Exception as e:
                self._state = EngineState.FAILED
                logger.error(f"[MathTex] MathJax 引擎加载失败: {type(e).__name__}: {e}")
                logger.error(f"[MathTex] 堆栈信息:\n{traceback.format_exc()}")
                if engine is not None:
                    await self._dispose(engine)
                raise EngineLoadError(f"MathJax 引擎加载失败: {e}", cause=e) from e

            self._engine = engine
            self._state = EngineState.READY
            logger.info("[MathTex] MathJax 引擎已就绪")

    async def unload(self) -> None:
        """释放引擎（幂等）"""
        async with self._lock:
            engine, self._engine = self._engine, None
            self._state = EngineState.UNLOADED
            if engine is not None:
                await self._dispose(engine)
                logger.info("[MathTex] MathJax 引擎已释放")

    async def convert_to_svg(self, request: ConversionRequest) -> str:
        """LaTeX -> SVG

        Raises:
            EmptyFormulaError: 公式为空
            InvalidOptionsError: 转换选项无法编码
            EngineNotReadyError: 引擎未就绪
            TypesetError: MathJax 报告公式错误
        """
        formula, options = self._prepare(request)
        async with self._lock:
            return await self._convert_svg(formula, options)

    async def convert_to_mathml(self, request: ConversionRequest) -> str:
        """LaTeX -> MathML"""
        formula, options = self._prepare(request)
        async with self._lock:
            return await self._convert_mathml(formula, options)

    async def convert_both(self, request: ConversionRequest) -> tuple[str, str]:
        """LaTeX -> (SVG, MathML)，SVG 失败时不再转换 MathML"""
        formula, options = self._prepare(request)
        async with self._lock:
            svg = await self._convert_svg(formula, options)
            mathml = await self._convert_mathml(formula, options)
            return svg, mathml

    def _prepare(self, request: ConversionRequest) -> tuple[str, str]:
        """清洗公式并编码选项"""
        formula = self._sanitizer.sanitize(request.formula)
        return formula, self._encoder.encode(request.options, display=request.display)

    async def _convert_svg(self, formula: str, options: str) -> str:
        result = await self._call(scripts.SVG_FUNCTION, formula, options)
        error = self._detector.detect(result)
        if error is not None:
            logger.debug(f"[MathTex] 公式错误: {error}")
            raise TypesetError(error)
        return result

    async def _convert_mathml(self, formula: str, options: str) -> str:
        return await self._call(scripts.MML_FUNCTION, formula, options)

    async def _call(self, function: str, formula: str, options: str) -> str:
        if self._state is not EngineState.READY or self._engine is None:
            raise EngineNotReadyError()

        expression = scripts.build_call(function, formula, options)
        logger.debug(f"[MathTex] 调用: {expression[:120]}")
        try:
            return await self._engine.evaluate(expression)
        except Exception as e:
            logger.error(f"[MathTex] {function} 调用失败: {type(e).__name__}: {e}")
            raise TypesetError(f"引擎调用失败: {e}") from e

    async def _dispose(self, engine: IScriptEngine) -> None:
        try:
            await engine.dispose()
        except Exception as e:
            logger.warning(f"[MathTex] 释放脚本引擎时出错: {e}")
