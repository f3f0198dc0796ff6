"""
命令处理器
处理 /tex, /texml 命令
"""

import traceback
import uuid
from pathlib import Path
from typing import TYPE_CHECKING, AsyncIterator

from astrbot.api import logger
from astrbot.api.event import AstrMessageEvent
import astrbot.api.message_components as Comp

from ..domain.errors import EngineLoadError
from ..types import RenderConfig
from ..utils import with_timeout

if TYPE_CHECKING:
    from ..application import FormulaService


class CommandHandler:
    """命令处理器"""

    def __init__(
        self,
        formula_service: "FormulaService",
        render_config: RenderConfig,
        output_dir: Path,
    ):
        self._formula_service = formula_service
        self._render_config = render_config
        self._output_dir = Path(output_dir)

    async def handle_tex(self, event: AstrMessageEvent, content: str) -> AsyncIterator:
        """处理 /tex 命令：渲染公式并发送图片"""
        formula = self._extract_command_content(event, "tex") or content

        if not formula:
            yield event.plain_result("请提供公式，例如: /tex E=mc^2")
            return

        logger.info(f"[MathTex] /tex 公式长度: {len(formula)}")

        try:
            await self._ensure_loaded()
            config = self._render_config
            render = with_timeout(config.render_timeout)(
                self._formula_service.render_formula_to_image
            )
            result = await render(
                formula,
                scale=config.scale,
                color=config.background_color or None,
                dpi=config.dpi,
            )
        except EngineLoadError as e:
            yield event.plain_result(f"MathJax 引擎加载失败: {e}")
            return
        except TimeoutError as e:
            logger.error(f"[MathTex] 渲染超时: {e}")
            yield event.plain_result("渲染超时，请简化公式后重试。")
            return

        if not result.success:
            yield event.plain_result(f"渲染失败: {result.error_message}")
            return

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            image_path = result.image.save(
                self._output_dir / f"tex_{uuid.uuid4().hex[:8]}.png"
            )
        except OSError as e:
            logger.error(f"[MathTex] 图片保存失败: {type(e).__name__}: {e}")
            logger.error(f"[MathTex] 堆栈信息:\n{traceback.format_exc()}")
            yield event.plain_result(f"图片保存失败: {e}")
            return

        logger.info(f"[MathTex] 图片生成成功: {image_path}")
        yield event.chain_result([Comp.Image.fromFileSystem(str(image_path))])

    async def handle_texml(self, event: AstrMessageEvent, content: str) -> AsyncIterator:
        """处理 /texml 命令：返回 MathML"""
        formula = self._extract_command_content(event, "texml") or content

        if not formula:
            yield event.plain_result("请提供公式，例如: /texml \\frac{a}{b}")
            return

        try:
            await self._ensure_loaded()
        except EngineLoadError as e:
            yield event.plain_result(f"MathJax 引擎加载失败: {e}")
            return

        result = await self._formula_service.convert_formula_to_vector_and_markup(formula)
        if not result.success:
            yield event.plain_result(f"转换失败: {result.error_message}")
            return

        yield event.plain_result(result.mathml)

    async def _ensure_loaded(self) -> None:
        """首次使用时加载引擎"""
        if not self._formula_service.is_loaded:
            await self._formula_service.load()

    def _extract_command_content(self, event: AstrMessageEvent, cmd_name: str) -> str:
        """从完整消息中提取命令后的内容（避免空格截断问题）"""
        full_msg = event.get_message_str()
        content = ""

        for prefix in [f"/{cmd_name} ", f"{cmd_name} "]:
            if full_msg.startswith(prefix):
                content = full_msg[len(prefix):]
                break

        return content.strip()
