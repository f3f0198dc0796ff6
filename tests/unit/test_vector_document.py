"""
SVG 文档单元测试
"""
import pytest

from astrbot_plugin_mathtex.infrastructure.raster import (
    VectorDocument,
    parse_length,
    round_half_up,
)

from conftest import SQUARE_SVG, VALID_SVG


class TestParseLength:
    """长度换算"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12", 12.0),
            ("12px", 12.0),
            ("2em", 32.0),
            ("5.254ex", 42.032),
            ("72pt", 96.0),
            ("1in", 96.0),
            ("2.54cm", 96.0),
            (".5ex", 4.0),
        ],
    )
    def test_units(self, text, expected):
        assert parse_length(text) == pytest.approx(expected)

    def test_em_size_configurable(self):
        assert parse_length("1ex", em_size=20) == pytest.approx(10.0)

    @pytest.mark.parametrize("text", [None, "", "100%", "abc", "12furlongs"])
    def test_unparseable(self, text):
        assert parse_length(text) is None


@pytest.mark.parametrize(
    "value, expected",
    [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (10.49, 10), (-0.5, -1)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


class TestVectorDocument:
    """文档解析"""

    def test_intrinsic_size_from_attributes(self):
        document = VectorDocument.parse(VALID_SVG)

        assert document.width == pytest.approx(80.0)
        assert document.height == pytest.approx(20.0)
        assert document.ppi == 96

    def test_size_from_viewbox_when_missing(self):
        svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 30 15"></svg>'
        document = VectorDocument.parse(svg)

        assert (document.width, document.height) == (30.0, 15.0)

    def test_unknown_size_rejected(self):
        with pytest.raises(ValueError):
            VectorDocument.parse('<svg xmlns="http://www.w3.org/2000/svg"></svg>')

    def test_malformed_document_rejected(self):
        with pytest.raises(Exception):
            VectorDocument.parse("<svg><g></svg>")

    def test_paint_uses_rounded_size(self):
        document = VectorDocument.parse(SQUARE_SVG)
        document.width = 20.5
        document.height = 10.2

        assert document.pixel_size == (21, 10)
        assert document.paint().startswith(b"\x89PNG")
