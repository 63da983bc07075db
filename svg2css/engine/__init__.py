"""Conversion engine: configuration, verbosity gating and the pipeline."""

from svg2css.engine.config import PipelineConfig
from svg2css.engine.pipeline import ConversionResult, Pipeline, convert_directory, create_pipeline
from svg2css.engine.verbosity import Verbosity, VerbosityLog

__all__ = [
    "PipelineConfig",
    "ConversionResult",
    "Pipeline",
    "convert_directory",
    "create_pipeline",
    "Verbosity",
    "VerbosityLog",
]
