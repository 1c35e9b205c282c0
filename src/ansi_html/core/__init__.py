"""Core data types: colors, style state, options, and errors."""

from ansi_html.core.color import Color, ColorMode, palette_rgb
from ansi_html.core.style import (
    DEFAULT_STYLE,
    Baseline,
    Blink,
    FontStyle,
    Intensity,
    StyleState,
    Underline,
)
from ansi_html.core.options import RenderOptions
from ansi_html.core.errors import (
    AnsiHtmlError,
    EmptyBufferError,
    SinkWriteError,
    SourceReadError,
)

__all__ = [
    "Color",
    "ColorMode",
    "palette_rgb",
    "DEFAULT_STYLE",
    "Baseline",
    "Blink",
    "FontStyle",
    "Intensity",
    "StyleState",
    "Underline",
    "RenderOptions",
    "AnsiHtmlError",
    "EmptyBufferError",
    "SinkWriteError",
    "SourceReadError",
]
