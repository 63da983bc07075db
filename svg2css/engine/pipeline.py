"""Pipeline orchestrator — turns SVG files into one stylesheet, file by file."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from svg2css.css.rules import build_blocks, encode_payload
from svg2css.engine.config import PipelineConfig
from svg2css.engine.verbosity import Verbosity, VerbosityLog
from svg2css.errors import DirectoryReadError, NoInputFiles, SourceReadError, WriteError
from svg2css.models.source import SourceImage, selector_name
from svg2css.models.stylesheet import OutputDocument
from svg2css.svg.dimensions import extract_dimensions
from svg2css.svg.parser import parse_svg
from svg2css.svg.serializer import normalize_markup

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Output of a pipeline run."""

    stylesheet: str = ""
    # Selectors in output order
    selectors: list[str] = field(default_factory=list)
    # Non-fatal conditions raised along the way
    warnings: list[NoInputFiles] = field(default_factory=list)
    elapsed_ms: float = 0.0


def file_extension(file_name: str) -> str:
    """Extension of the final path component, dot included.

    Leading dots do not start an extension, so ``.svg`` has none.
    """
    return os.path.splitext(os.path.basename(file_name))[1]


def filter_files(file_names: Iterable[str], extension: str = ".svg") -> list[str]:
    """Names whose extension matches exactly (case-sensitive), order kept."""
    return [name for name in file_names if file_extension(name) == extension]


class Pipeline:
    """Runs parse → dimensions → normalize → encode for each file, in order."""

    def __init__(self, config: PipelineConfig, log: VerbosityLog | None = None) -> None:
        self.config = config
        self.log = log or VerbosityLog(Verbosity.NONE)

    def selector_for(self, file_name: str) -> str:
        return selector_name(file_name, self.config.prefix)

    def convert_file(self, file_name: str) -> list[str]:
        """Blocks for one file: optional dimension variables, then the rule."""
        path = self.config.source_dir / file_name
        self.log(Verbosity.BASIC, "Processing: %s", path)

        try:
            image = SourceImage.load(self.config.source_dir, file_name, self.config.prefix)
        except OSError as e:
            raise SourceReadError(str(path), e.strerror or str(e)) from e

        tree = parse_svg(image.content, source=str(image.path))

        dimensions = None
        if self.config.write_dimensions:
            dimensions = extract_dimensions(tree)
            if dimensions is not None:
                self.log(
                    Verbosity.DETAIL,
                    "Dimensions of %s: %s x %s",
                    image.selector,
                    dimensions.width,
                    dimensions.height,
                )

        markup = normalize_markup(tree)
        self.log(Verbosity.DEBUG, "SVG before encoding:\n%s\n", markup)
        if self.log.enabled(Verbosity.DEBUG):
            self.log(Verbosity.DEBUG, "Encoded SVG:\n%s\n", encode_payload(markup))

        return build_blocks(image.selector, markup, dimensions, self.config.write_dimensions)

    def run(self, file_names: Iterable[str]) -> ConversionResult:
        """Convert the given names, in the order given, into a stylesheet."""
        start = time.perf_counter()
        file_names = list(file_names)
        result = ConversionResult()

        inputs = filter_files(file_names, self.config.extension)
        for name in file_names:
            if name not in inputs:
                self.log(Verbosity.DETAIL, "Skipping: %s", name)

        if not inputs:
            warning = NoInputFiles(str(self.config.source_dir))
            logger.warning("%s", warning)
            result.warnings.append(warning)

        output = OutputDocument()
        for name in inputs:
            output = output.extend(self.convert_file(name))
            result.selectors.append(self.selector_for(name))

        result.stylesheet = output.render()
        result.elapsed_ms = round((time.perf_counter() - start) * 1000, 1)
        logger.debug("Converted %d file(s) in %.1fms", len(inputs), result.elapsed_ms)
        return result


def list_source_dir(source_dir: Path) -> list[str]:
    """File names in ``source_dir``, in the order the OS returns them."""
    try:
        return os.listdir(source_dir)
    except OSError as e:
        raise DirectoryReadError(str(source_dir), e.strerror or str(e)) from e


def write_stylesheet(destination: Path, text: str, encoding: str = "utf-8") -> None:
    try:
        Path(destination).write_text(text, encoding=encoding)
    except OSError as e:
        raise WriteError(str(destination), e.strerror or str(e)) from e


def convert_directory(
    config: PipelineConfig,
    destination: Path | str,
    log: VerbosityLog | None = None,
) -> ConversionResult:
    """List the source directory, convert every SVG and write the stylesheet.

    Nothing is written when any file fails to read or parse.
    """
    pipeline = create_pipeline(config, log)
    file_names = list_source_dir(config.source_dir)
    result = pipeline.run(file_names)

    pipeline.log(Verbosity.BASIC, "Writing file %s", destination)
    write_stylesheet(Path(destination), result.stylesheet, config.encoding)
    return result


def create_pipeline(config: PipelineConfig | None = None, log: VerbosityLog | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config or PipelineConfig(), log=log)
