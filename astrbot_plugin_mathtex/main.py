"""
AstrBot MathTex 插件
将 LaTeX 公式渲染为图片
"""
from pathlib import Path

from astrbot.api.event import filter, AstrMessageEvent
from astrbot.api.star import Context, Star, StarTools, register
from astrbot.api import logger
from astrbot.api import AstrBotConfig

from .application import FormulaService
from .handlers import CommandHandler
from .types import EngineConfig, MATHJAX_CDN, RenderConfig

PLUGIN_NAME = "astrbot_plugin_mathtex"


@register(
    PLUGIN_NAME,
    "Willixrain",
    "使用 MathJax 将 LaTeX 公式渲染为图片",
    "1.0.0"
)
class MathTexPlugin(Star):
    """LaTeX 公式转图片插件"""

    def __init__(self, context: Context, config: AstrBotConfig):
        super().__init__(context)
        self.config = config

        engine_config = EngineConfig(mathjax_source=self._resolve_mathjax_source())
        render_config = RenderConfig(
            scale=float(config.get("scale", 3.0)),
            dpi=int(config.get("dpi", 300)),
            background_color=config.get("background_color", ""),
            render_timeout=int(config.get("render_timeout", 30000)),
        )

        # 引擎在首次命令时加载
        self.formula_service = FormulaService(engine_config)
        self.command_handler = CommandHandler(
            formula_service=self.formula_service,
            render_config=render_config,
            output_dir=StarTools.get_data_dir(PLUGIN_NAME),
        )

    def _resolve_mathjax_source(self) -> str:
        """配置项优先，其次插件内置文件，最后使用CDN"""
        configured = self.config.get("mathjax_source", "")
        if configured:
            return configured

        mathjax_file = Path(__file__).resolve().parent / "static" / "mathjax" / "tex-svg-full.js"
        if mathjax_file.exists():
            logger.info(f"[MathTex] 使用本地 MathJax: {mathjax_file}")
            return str(mathjax_file)

        logger.warning(f"[MathTex] 未找到本地 MathJax，使用 CDN: {MATHJAX_CDN}")
        return MATHJAX_CDN

    @filter.command("tex")
    async def cmd_tex(self, event: AstrMessageEvent, content: str = ""):
        """渲染 LaTeX 公式为图片"""
        async for result in self.command_handler.handle_tex(event, content):
            yield result

    @filter.command("texml")
    async def cmd_texml(self, event: AstrMessageEvent, content: str = ""):
        """将 LaTeX 公式转换为 MathML"""
        async for result in self.command_handler.handle_texml(event, content):
            yield result

    async def terminate(self):
        """插件卸载时清理资源"""
        await self.formula_service.unload_engine()
        logger.info("[MathTex] 插件已卸载")
