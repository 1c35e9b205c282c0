"""Renderers for scanned terminal output."""

from ansi_html.render.html import (
    HtmlRenderer,
    HtmlWriter,
    TextRun,
    coalesce,
    escape_html,
    render,
)
from ansi_html.render.css import stylesheet
from ansi_html.render.text import strip_ansi

__all__ = [
    "HtmlRenderer",
    "HtmlWriter",
    "TextRun",
    "coalesce",
    "escape_html",
    "render",
    "stylesheet",
    "strip_ansi",
]
