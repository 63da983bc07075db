"""Intrinsic size of an SVG: explicit width/height, falling back to viewBox."""

from __future__ import annotations

from lxml import etree

from svg2css.models.source import Dimensions
from svg2css.svg.parser import find_svg_element


def extract_dimensions(tree: etree._ElementTree) -> Dimensions | None:
    """Width and height of the first ``svg`` element, or None.

    Values are returned verbatim. A width or height of "0" or "" counts as
    missing, so the viewBox is used instead. The viewBox is split on single
    spaces and needs at least four tokens.
    """
    svg = find_svg_element(tree)
    if svg is None or not len(svg.attrib):
        return None

    attrs = svg.attrib
    width = attrs.get("width", "")
    height = attrs.get("height", "")
    if _present(width) and _present(height):
        return Dimensions(width=width, height=height)

    viewbox = attrs.get("viewBox", "")
    if not viewbox:
        return None

    parts = viewbox.split(" ")
    if len(parts) < 4:
        return None

    return Dimensions(width=parts[2], height=parts[3])


def _present(value: str) -> bool:
    return bool(value) and value != "0"
