"""Serialize a parsed SVG back to single-line markup for embedding."""

from __future__ import annotations

import re

from lxml import etree

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_LINEBREAK_RE = re.compile(r"[\n\r]")
# Collapses one or two tabs per match; three tabs become two spaces.
_TAB_RE = re.compile(r"(\t\t|\t)")


def serialize_document(tree: etree._ElementTree) -> str:
    """Full document as text, CDATA sections written verbatim, no XML declaration."""
    return etree.tostring(tree, encoding="unicode")


def strip_markup(svg_text: str) -> str:
    """Remove comments and line breaks, then collapse tabs to spaces."""
    # Remove comments
    svg_text = _COMMENT_RE.sub("", svg_text)
    # Remove line breaks
    svg_text = _LINEBREAK_RE.sub("", svg_text)
    # Replace tabs / collapse double tabs
    return _TAB_RE.sub(" ", svg_text)


def normalize_markup(tree: etree._ElementTree) -> str:
    return strip_markup(serialize_document(tree))
