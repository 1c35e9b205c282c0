"""Conversion entry points for buffers, streams, and files."""

from ansi_html.io.converter import (
    Converter,
    convert,
    convert_file,
    convert_stream,
    convert_with_classes,
    html_document,
    new_pipeline,
)

__all__ = [
    "Converter",
    "convert",
    "convert_file",
    "convert_stream",
    "convert_with_classes",
    "html_document",
    "new_pipeline",
]
