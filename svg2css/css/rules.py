"""Build stylesheet text from a selector and normalized SVG markup."""

from __future__ import annotations

import base64

from svg2css.models.source import Dimensions
from svg2css.models.stylesheet import CssRule


def encode_payload(markup: str) -> str:
    """Base64 of the UTF-8 bytes of ``markup``."""
    return base64.b64encode(markup.encode("utf-8")).decode("ascii")


def render_rule(selector: str, payload: str) -> str:
    return CssRule(selector=selector, payload=payload).render()


def render_dimension_variables(selector: str, dimensions: Dimensions) -> list[str]:
    """SCSS variables holding the image size."""
    return [
        f"${selector}-width: {dimensions.width};",
        f"${selector}-height: {dimensions.height};",
    ]


def build_blocks(
    selector: str,
    markup: str,
    dimensions: Dimensions | None = None,
    write_dimensions: bool = False,
) -> list[str]:
    """Dimension variables (when enabled and known) followed by the rule.

    The selector is used as-is, without escaping.
    """
    blocks: list[str] = []
    if write_dimensions and dimensions is not None:
        blocks.extend(render_dimension_variables(selector, dimensions))
    blocks.append(render_rule(selector, encode_payload(markup)))
    return blocks
