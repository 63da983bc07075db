"""Shared test fixtures: sample SVGs and source directories."""

from __future__ import annotations

from pathlib import Path

import pytest

SQUARE_SVG = '<svg width="10" height="10"><rect/></svg>'

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

VIEWBOX_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 50">
\t<rect x="10" y="10" width="80" height="30" fill="#4ECDC4"/>
</svg>'''

COMMENTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
<!-- c -->
\t<rect/>
<!--
  multi-line
  comment
-->
</svg>'''

STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24px" height="24px">
  <style><![CDATA[
    .a > .b { fill: "red" & blue; }
  ]]></style>
  <rect class="a"/>
</svg>'''

NESTED_SVG = '''<g xmlns="http://www.w3.org/2000/svg">
  <svg width="32" height="16"><rect/></svg>
  <svg width="8" height="8"><rect/></svg>
</g>'''

MALFORMED_SVG = '<svg width="10" height="10"><rect></svg>'


def write_sources(directory: Path, files: dict[str, str]) -> Path:
    """Write ``{name: content}`` into ``directory`` and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (directory / name).write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    return write_sources(
        tmp_path / "icons",
        {
            "square.svg": SQUARE_SVG,
            "circle.svg": CIRCLE_SVG,
            "wide.min.svg": VIEWBOX_ONLY_SVG,
            "notes.txt": "not an svg",
            "upper.SVG": SQUARE_SVG,
            "backup.svg.txt": SQUARE_SVG,
        },
    )


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    return write_sources(tmp_path / "empty", {"readme.md": "# nothing here"})
