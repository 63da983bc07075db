"""SVG parser — facade over lxml.

Parses raw SVG bytes into an lxml ElementTree. CDATA sections and comments are
kept in the tree so the serializer can write them back unchanged.
"""

from __future__ import annotations

import logging

from lxml import etree

from svg2css.errors import ParseError

logger = logging.getLogger(__name__)

# First element named svg, anywhere, in document order. Namespace-agnostic.
_SVG_XPATH = etree.XPath("//*[local-name()='svg']")


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        strip_cdata=False,
        remove_comments=False,
        remove_blank_text=False,
        resolve_entities=False,
        no_network=True,
        # Embedded raster data URIs exceed the default 10MB node limit
        huge_tree=True,
    )


def parse_svg(content: bytes | str, source: str = "<string>") -> etree._ElementTree:
    """Parse SVG markup into an ElementTree, raising ParseError if malformed."""
    if isinstance(content, str):
        # lxml rejects str input that carries an encoding declaration
        content = content.encode("utf-8")

    try:
        root = etree.fromstring(content, _make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(source, str(e)) from e

    logger.debug("Parsed %s: root <%s>", source, etree.QName(root).localname)
    return root.getroottree()


def find_svg_element(tree: etree._ElementTree) -> etree._Element | None:
    """Return the first element named ``svg`` in the document, nested or not."""
    matches = _SVG_XPATH(tree)
    return matches[0] if matches else None
