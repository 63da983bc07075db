"""Data models for source images and generated stylesheets."""

from svg2css.models.source import Dimensions, SourceImage, base_name, selector_name
from svg2css.models.stylesheet import CssRule, OutputDocument

__all__ = [
    "Dimensions",
    "SourceImage",
    "base_name",
    "selector_name",
    "CssRule",
    "OutputDocument",
]
