r"""
ansi-html: render ANSI terminal output as HTML

Turns captured terminal output (build logs, session recordings) into
``<span>`` markup a browser can display with the same colors and text
attributes.

Quick Start:
    >>> import ansi_html
    >>> ansi_html.convert(b"\x1b[33mYellow\x1b[m")
    b'<span style="color:olive;">Yellow</span>'
    >>> ansi_html.convert_with_classes(b"\x1b[1mBold", class_prefix="a-")
    b'<span class="a-bold">Bold</span>'

Features:
    - Incremental scanner that survives arbitrary chunk boundaries
    - Full SGR support: 16, 256, and 24-bit colors, underline colors,
      text attributes, alternate fonts, super/subscript
    - Inline-style or class-based output, with a matching stylesheet
    - Streaming conversion of files and pipes
"""

__version__ = "0.1.0"

# Core types
from ansi_html.core.color import Color, ColorMode
from ansi_html.core.style import DEFAULT_STYLE, StyleState
from ansi_html.core.options import RenderOptions
from ansi_html.core.errors import (
    AnsiHtmlError,
    EmptyBufferError,
    SinkWriteError,
    SourceReadError,
)

# Pipeline stages
from ansi_html.codec.scanner import EscapeEvent, Scanner
from ansi_html.codec.sgr import SgrInterpreter, apply_sgr
from ansi_html.render.html import HtmlRenderer, TextRun
from ansi_html.render.css import stylesheet
from ansi_html.render.text import strip_ansi

# Convenience functions
from ansi_html.io.converter import (
    Converter,
    convert,
    convert_file,
    convert_stream,
    convert_with_classes,
    new_pipeline,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "DEFAULT_STYLE",
    "StyleState",
    "RenderOptions",
    # Errors
    "AnsiHtmlError",
    "EmptyBufferError",
    "SinkWriteError",
    "SourceReadError",
    # Pipeline stages
    "EscapeEvent",
    "Scanner",
    "SgrInterpreter",
    "apply_sgr",
    "HtmlRenderer",
    "TextRun",
    "stylesheet",
    "strip_ansi",
    # Conversion
    "Converter",
    "convert",
    "convert_file",
    "convert_stream",
    "convert_with_classes",
    "new_pipeline",
]
