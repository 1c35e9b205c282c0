"""Render styled text runs to HTML spans."""

import functools
import io
from dataclasses import dataclass
from typing import Iterable, Optional

from ansi_html.codec.scanner import Sink
from ansi_html.core.style import (
    DEFAULT_STYLE,
    Baseline,
    Blink,
    FontStyle,
    Intensity,
    StyleState,
    Underline,
)

# Distinct styles remembered per renderer; truecolor output can produce many
TAG_CACHE_SIZE = 256


@dataclass(frozen=True)
class TextRun:
    """Literal bytes and the style that was active when they were scanned."""
    text: bytes
    style: StyleState = DEFAULT_STYLE


def escape_html(data: bytes) -> bytes:
    """Escape the characters that would otherwise start markup."""
    return (data
        .replace(b'&', b'&amp;')
        .replace(b'<', b'&lt;')
        .replace(b'>', b'&gt;')
    )


def coalesce(runs: Iterable[TextRun]) -> list[TextRun]:
    """Merge adjacent runs with identical style and drop empty ones."""
    merged: list[TextRun] = []
    for run in runs:
        if not run.text:
            continue
        if merged and merged[-1].style == run.style:
            merged[-1] = TextRun(merged[-1].text + run.text, run.style)
        else:
            merged.append(run)
    return merged


class HtmlRenderer:
    """
    Turn a StyleState into the opening tag of a span.

    Inline mode writes every attribute as a CSS declaration. Class mode
    writes semantic class names (``bold``, ``fg-yellow``) prefixed with
    ``class_prefix``; colors without a name fall back to a ``style``
    attribute, or are left out when ``no_styles`` is set.
    """

    def __init__(
        self,
        use_classes: bool = False,
        class_prefix: str = "",
        no_styles: bool = False,
    ):
        self.use_classes = use_classes
        self.class_prefix = class_prefix
        self.no_styles = no_styles
        self._cached_tag = functools.lru_cache(maxsize=TAG_CACHE_SIZE)(self._encode_tag)

    def render(self, runs: Iterable[TextRun]) -> bytes:
        """Render runs to HTML bytes."""
        out = io.BytesIO()
        writer = HtmlWriter(out, self)
        for run in coalesce(runs):
            writer.write_run(run)
        writer.close()
        return out.getvalue()

    def open_tag(self, style: StyleState) -> bytes:
        """Opening ``<span>`` for ``style``, or empty bytes if none is needed."""
        return self._cached_tag(style)

    def _encode_tag(self, style: StyleState) -> bytes:
        return self._make_tag(style).encode('utf-8')

    def _make_tag(self, style: StyleState) -> str:
        if style.is_default():
            return ''

        if not self.use_classes:
            declarations = self.style_declarations(style)
            if not declarations:
                return ''
            return f'<span style="{declarations}">'

        classes = ' '.join(self.class_prefix + name for name in self.class_names(style))
        declarations = '' if self.no_styles else self.color_declarations(style, unnamed_only=True)

        attributes: list[str] = []
        if classes:
            attributes.append(f'class="{classes}"')
        if declarations:
            attributes.append(f'style="{declarations}"')
        if not attributes:
            return ''
        return f'<span {" ".join(attributes)}>'

    def style_declarations(self, style: StyleState) -> str:
        """CSS declarations for inline mode, each terminated by ``;``."""
        parts: list[str] = []

        if style.intensity is Intensity.BOLD:
            parts.append("font-weight:bold;")
        elif style.intensity is Intensity.FAINT:
            parts.append("font-weight:lighter;")

        if style.font_style is FontStyle.ITALIC:
            parts.append("font-style:italic;")

        lines: list[str] = []
        if style.underline is Underline.SINGLE:
            lines.append("underline")
        if style.strikethrough:
            lines.append("line-through")
        if style.overline:
            lines.append("overline")
        if lines:
            parts.append(f"text-decoration-line:{' '.join(lines)};")

        if style.inverted:
            parts.append("filter:invert(100%);")
        if style.hidden:
            parts.append("opacity:0;")
        if style.proportional and style.font == 0:
            parts.append("font-family:sans-serif;")

        if style.baseline is Baseline.SUPER:
            parts.append("vertical-align:super;")
        elif style.baseline is Baseline.SUB:
            parts.append("vertical-align:sub;")

        parts.append(self.color_declarations(style))
        return ''.join(parts)

    def color_declarations(self, style: StyleState, unnamed_only: bool = False) -> str:
        """CSS declarations for the three colors of ``style``."""
        parts: list[str] = []
        for prop, color in (
            ("color", style.foreground),
            ("background-color", style.background),
            ("text-decoration-color", style.underline_color),
        ):
            if not color.is_set or (unnamed_only and color.is_named):
                continue
            parts.append(f"{prop}:{color.to_css()};")
        return ''.join(parts)

    def class_names(self, style: StyleState) -> list[str]:
        """Semantic class names for class mode, without prefix."""
        names: list[str] = []

        if style.intensity is not Intensity.NORMAL:
            names.append(style.intensity.value)
        if style.font_style is not FontStyle.NORMAL:
            names.append(style.font_style.value)

        if style.underline is Underline.SINGLE:
            names.append("underline")
        elif style.underline is Underline.DOUBLE:
            names.append("double-underline")

        if style.strikethrough:
            names.append("strikethrough")
        if style.overline:
            names.append("overline")

        if style.blink is Blink.SLOW:
            names.append("slow-blink")
        elif style.blink is Blink.FAST:
            names.append("fast-blink")

        if style.inverted:
            names.append("invert")
        if style.hidden:
            names.append("hide")

        if style.font:
            names.append(f"font-{style.font}")
        elif style.proportional:
            names.append("proportional")

        if style.baseline is Baseline.SUPER:
            names.append("superscript")
        elif style.baseline is Baseline.SUB:
            names.append("subscript")

        for prefix, color in (
            ("fg", style.foreground),
            ("bg", style.background),
            ("ul", style.underline_color),
        ):
            if color.is_named:
                names.append(f"{prefix}-{color.name}")

        return names


class HtmlWriter:
    """
    Streaming HTML sink.

    Accepts literal bytes through ``write`` (so it can be handed to a
    Scanner as its sink) and tags them with the current ``style``, which an
    SgrInterpreter updates through ``set_style``. A span stays open while the style is unchanged, so
    adjacent runs with the same style share one span.
    """

    def __init__(
        self,
        out: Sink,
        renderer: Optional[HtmlRenderer] = None,
        style: StyleState = DEFAULT_STYLE,
    ):
        self.out = out
        self.renderer = renderer or HtmlRenderer()
        self.style = style
        self._style: StyleState = DEFAULT_STYLE
        self._span_open = False

    def set_style(self, style: StyleState) -> None:
        """Style for text written from now on."""
        self.style = style

    def write(self, data: bytes) -> int:
        self.write_run(TextRun(bytes(data), self.style))
        return len(data)

    def write_run(self, run: TextRun) -> None:
        if not run.text:
            return
        if run.style != self._style:
            self._close_span()
            tag = self.renderer.open_tag(run.style)
            if tag:
                self.out.write(tag)
                self._span_open = True
            self._style = run.style
        self.out.write(escape_html(run.text))

    def close(self) -> None:
        """Close any open span. The writer can keep being used afterwards."""
        self._close_span()
        self._style = DEFAULT_STYLE

    def _close_span(self) -> None:
        if self._span_open:
            self.out.write(b'</span>')
            self._span_open = False


def render(
    runs: Iterable[TextRun],
    class_prefix: str = "",
    no_styles: bool = False,
    use_classes: bool = False,
) -> bytes:
    """Render text runs to HTML in inline-style or class mode."""
    renderer = HtmlRenderer(
        use_classes=use_classes,
        class_prefix=class_prefix,
        no_styles=no_styles,
    )
    return renderer.render(runs)
