"""Embed a folder of SVG files into one stylesheet as data URLs."""

__version__ = "0.1.0"
