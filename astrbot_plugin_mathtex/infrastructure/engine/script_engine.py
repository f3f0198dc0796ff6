"""
脚本引擎
以无头 Chromium 页面作为嵌入式 JS 引擎
"""
import traceback
from pathlib import Path
from typing import Optional

from playwright.async_api import async_playwright, Browser, Page, Playwright

from astrbot.api import logger


class ScriptExecutionError(RuntimeError):
    """脚本执行错误"""


class PlaywrightScriptEngine:
    """基于 Playwright 的脚本引擎

    只提供三类操作：执行脚本、表达式求值、释放资源。
    """

    def __init__(self, headless: bool = True, browser_args: tuple[str, ...] = ()):
        self._headless = headless
        self._browser_args = list(browser_args)
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None
        self._page_errors: list[str] = []

    async def start(self) -> None:
        """启动浏览器并创建空白页面"""
        try:
            self._playwright = await async_playwright().start()
            logger.debug("[MathTex] Playwright 已启动")

            self._browser = await self._playwright.chromium.launch(
                headless=self._headless, args=self._browser_args
            )
            self._page = await self._browser.new_page()
            self._setup_logging(self._page)
            logger.info("[MathTex] 脚本引擎页面已创建")
        except Exception as e:
            logger.error(f"[MathTex] 浏览器启动失败: {type(e).__name__}: {e}")
            logger.error(f"[MathTex] 堆栈信息:\n{traceback.format_exc()}")
            await self.dispose()
            raise

    def _setup_logging(self, page: Page) -> None:
        """设置页面日志"""
        page.on(
            "console", lambda msg: logger.debug(f"[Browser] {msg.type}: {msg.text}")
        )
        page.on("pageerror", self._on_page_error)

    def _on_page_error(self, error) -> None:
        logger.error(f"[Browser Error] {error}")
        self._page_errors.append(str(error))

    async def execute(self, script: str) -> None:
        """在全局作用域执行脚本文本"""
        page = self._require_page()
        await page.evaluate("script => { (0, eval)(script); }", script)

    async def execute_source(self, source: str) -> None:
        """执行外部脚本（本地路径或URL）"""
        page = self._require_page()
        self._page_errors.clear()

        if source.startswith(("http://", "https://")):
            await page.add_script_tag(url=source)
        else:
            path = Path(source)
            if not path.is_file():
                raise FileNotFoundError(f"脚本文件不存在: {path}")
            await page.add_script_tag(path=str(path))

        # 往返一次，确保页面错误事件已送达
        await page.evaluate("() => true")
        if self._page_errors:
            raise ScriptExecutionError(f"脚本执行失败 ({source}): {self._page_errors[0]}")

    async def evaluate(self, expression: str) -> str:
        """对表达式求值，返回字符串"""
        page = self._require_page()
        result = await page.evaluate(expression)
        return "" if result is None else str(result)

    async def dispose(self) -> None:
        """关闭页面、浏览器和Playwright"""
        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.warning(f"[MathTex] 关闭浏览器时出错: {e}")
            finally:
                self._browser = None
                self._page = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning(f"[MathTex] 关闭Playwright时出错: {e}")
            finally:
                self._playwright = None

    def _require_page(self) -> Page:
        if self._page is None:
            raise ScriptExecutionError("脚本引擎未启动")
        return self._page
