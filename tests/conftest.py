"""
测试公共夹具
"""
import asyncio
import re
from typing import Optional

import pytest

from astrbot_plugin_mathtex.application import FormulaService
from astrbot_plugin_mathtex.infrastructure.engine import TypesetEngine
from astrbot_plugin_mathtex.types import EngineConfig

# 10ex x 2.5ex -> 80x20 像素（em=16），中间一块实心矩形，四角留空
VALID_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="10ex" height="2.5ex" '
    'viewBox="0 0 1000 250" role="img" focusable="false">'
    '<rect x="400" y="100" width="200" height="50" fill="#000000"/>'
    "</svg>"
)

# 40px x 40px，整体填满蓝色
SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="40px" height="40px" '
    'viewBox="0 0 40 40">'
    '<rect x="0" y="0" width="40" height="40" fill="#0000ff"/>'
    "</svg>"
)

ERROR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="12ex" height="2ex" '
    'viewBox="0 0 1200 200"><g data-mml-node="merror" '
    'data-mjx-error="Missing close brace" title="Missing close brace">'
    '<rect width="1200" height="200" fill="red"/></g></svg>'
)

MATHML = '<math xmlns="http://www.w3.org/1998/Math/MathML" display="block"><mi>x</mi></math>'

CALL_PATTERN = re.compile(r'^(\w+)\("(.*)",(\{.*\})\)$', re.DOTALL)


class FakeScriptEngine:
    """脚本引擎替身，按清洗后的公式返回预置结果"""

    def __init__(
        self,
        responses: Optional[dict] = None,
        fail_on: Optional[str] = None,
        delay: float = 0,
    ):
        self.responses = responses or {}
        self.fail_on = fail_on
        self.delay = delay
        self.calls: list[tuple[str, str]] = []
        self.active = 0
        self.max_active = 0

    async def start(self) -> None:
        self._record("start", "")

    async def execute(self, script: str) -> None:
        self._record("execute", script)

    async def execute_source(self, source: str) -> None:
        self._record("execute_source", source)

    async def evaluate(self, expression: str) -> str:
        self._record("evaluate", expression)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            match = CALL_PATTERN.match(expression)
            if match is None:
                return "true"
            function, formula, _ = match.groups()
            if function == "HtmlToMMLConvert":
                return MATHML
            return self.responses.get(formula, VALID_SVG)
        finally:
            self.active -= 1

    async def dispose(self) -> None:
        self._record("dispose", "")

    def _record(self, op: str, arg: str) -> None:
        self.calls.append((op, arg))
        if self.fail_on == op:
            raise RuntimeError(f"{op} failed")

    @property
    def evaluations(self) -> list[str]:
        return [arg for op, arg in self.calls if op == "evaluate"]


class FakeEngineFactory:
    """记录每次创建的引擎替身"""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.engines: list[FakeScriptEngine] = []

    def __call__(self) -> FakeScriptEngine:
        engine = FakeScriptEngine(**self.kwargs)
        self.engines.append(engine)
        return engine

    @property
    def last(self) -> FakeScriptEngine:
        return self.engines[-1]


@pytest.fixture
def engine_config():
    return EngineConfig(mathjax_source="/opt/mathjax/tex-svg-full.js")


@pytest.fixture
def engine_factory():
    return FakeEngineFactory(responses={r"\\frac{1}": ERROR_SVG})


@pytest.fixture
def typeset_engine(engine_config, engine_factory):
    return TypesetEngine(engine_config, engine_factory=engine_factory)


@pytest.fixture
def formula_service(typeset_engine):
    return FormulaService(engine=typeset_engine)
