"""
领域层 - 核心接口定义
遵循依赖倒置原则(DIP)，定义抽象接口
"""

from typing import Protocol, runtime_checkable

from ..types import RasterSpec


@runtime_checkable
class IScriptEngine(Protocol):
    """嵌入式脚本引擎接口"""

    async def start(self) -> None:
        """创建引擎实例"""
        ...

    async def execute(self, script: str) -> None:
        """执行脚本文本"""
        ...

    async def execute_source(self, source: str) -> None:
        """执行外部脚本（本地路径或URL）"""
        ...

    async def evaluate(self, expression: str) -> str:
        """对表达式求值并返回字符串结果"""
        ...

    async def dispose(self) -> None:
        """释放引擎资源"""
        ...


@runtime_checkable
class IRasterizer(Protocol):
    """栅格化器接口"""

    def render(self, svg: str, spec: RasterSpec):
        """将SVG渲染为像素缓冲区

        Returns:
            PixelBuffer
        """
        ...
