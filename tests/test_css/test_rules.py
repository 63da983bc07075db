"""Tests for CSS rule building."""

import base64

from svg2css.css.rules import build_blocks, encode_payload, render_dimension_variables, render_rule
from svg2css.models.source import Dimensions
from svg2css.models.stylesheet import CssRule, OutputDocument


def test_encode_payload_known_value():
    assert encode_payload("<svg/>") == "PHN2Zy8+"


def test_encode_payload_is_deterministic():
    markup = '<svg width="10" height="10"><rect/></svg>'
    assert encode_payload(markup) == encode_payload(markup)


def test_encode_payload_uses_utf8():
    markup = "<svg><text>é</text></svg>"
    assert base64.b64decode(encode_payload(markup)) == markup.encode("utf-8")


def test_render_rule_template():
    assert render_rule("icon", "QUJD") == (
        ".icon {\n"
        "    background-image: url(data:image/svg+xml;base64,QUJD);\n"
        "}\n"
    )


def test_css_rule_model_renders_same_text():
    assert CssRule(selector="a", payload="Zg==").render() == render_rule("a", "Zg==")


def test_dimension_variables():
    lines = render_dimension_variables("ui-icon", Dimensions(width="24px", height="12"))
    assert lines == ["$ui-icon-width: 24px;", "$ui-icon-height: 12;"]


def test_build_blocks_with_dimensions():
    blocks = build_blocks("sq", "<svg/>", Dimensions(width="1", height="2"), write_dimensions=True)
    assert blocks[:2] == ["$sq-width: 1;", "$sq-height: 2;"]
    assert blocks[2] == render_rule("sq", "PHN2Zy8+")


def test_build_blocks_dimensions_disabled():
    blocks = build_blocks("sq", "<svg/>", Dimensions(width="1", height="2"), write_dimensions=False)
    assert blocks == [render_rule("sq", "PHN2Zy8+")]


def test_build_blocks_dimensions_unknown():
    assert len(build_blocks("sq", "<svg/>", None, write_dimensions=True)) == 1


def test_selector_not_escaped():
    assert render_rule("a:b", "x").startswith(".a:b {\n")


def test_output_document_joins_with_newline():
    doc = OutputDocument().extend(["one"]).extend(["two", "three\n"])
    assert doc.render() == "one\ntwo\nthree\n"
    assert OutputDocument().render() == ""
