"""Pipeline configuration: the immutable settings of a single run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PipelineConfig:
    """Controls where SVGs are read from and how rules are emitted."""

    source_dir: Path = field(default_factory=Path)
    # Prepended to every selector
    prefix: str = ""
    # Emit $name-width / $name-height variables before each rule
    write_dimensions: bool = False
    # Exact, case-sensitive extension of files to pick up
    extension: str = ".svg"
    # Encoding of the written stylesheet
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        # Accept plain strings for source_dir
        if not isinstance(self.source_dir, Path):
            object.__setattr__(self, "source_dir", Path(self.source_dir))
