"""
接口一致性测试
"""
from astrbot_plugin_mathtex.domain import IRasterizer, IScriptEngine
from astrbot_plugin_mathtex.infrastructure import PlaywrightScriptEngine, Rasterizer

from conftest import FakeScriptEngine


def test_script_engines_satisfy_protocol():
    assert isinstance(PlaywrightScriptEngine(), IScriptEngine)
    assert isinstance(FakeScriptEngine(), IScriptEngine)


def test_rasterizer_satisfies_protocol():
    assert isinstance(Rasterizer(), IRasterizer)
