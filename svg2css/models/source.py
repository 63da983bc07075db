"""Input-side models: a source SVG file and its intrinsic dimensions."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


def base_name(file_name: str) -> str:
    """File name up to the first dot: ``icon.min.svg`` -> ``icon``."""
    return file_name.split(".")[0]


def selector_name(file_name: str, prefix: str = "") -> str:
    return prefix + base_name(file_name)


class Dimensions(BaseModel):
    """Width and height as written in the SVG, units and all."""

    width: str
    height: str

    model_config = {"frozen": True}


class SourceImage(BaseModel):
    """A single SVG file read from the source directory."""

    path: Path
    content: bytes
    base_name: str
    selector: str

    model_config = {"frozen": True}

    @classmethod
    def load(cls, directory: Path, file_name: str, prefix: str = "") -> SourceImage:
        path = Path(directory) / file_name
        return cls(
            path=path,
            content=path.read_bytes(),
            base_name=base_name(file_name),
            selector=selector_name(file_name, prefix),
        )
