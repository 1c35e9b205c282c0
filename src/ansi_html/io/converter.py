"""Convert ANSI-coded bytes, streams, and files to HTML."""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional

from ansi_html.codec.scanner import Scanner, Sink
from ansi_html.codec.sgr import SgrInterpreter
from ansi_html.core.errors import SinkWriteError
from ansi_html.core.options import RenderOptions
from ansi_html.render.css import stylesheet
from ansi_html.render.html import HtmlRenderer, HtmlWriter, escape_html

logger = logging.getLogger(__name__)

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
pre.ansi {{ font-family: monospace; background: #000; color: #c0c0c0; padding: 1em; }}
{styles}</style>
</head>
<body>
<pre class="ansi">{body}</pre>
</body>
</html>
"""


def new_pipeline(source: Optional[BinaryIO], sink: Optional[Sink]) -> Scanner:
    """Create a reusable scanner bound to ``source`` and ``sink``."""
    return Scanner(source, sink)


class Converter:
    """
    Scanner, SGR interpreter and HTML writer wired into one pass.

    A Converter holds only options and the renderer's tag cache; every
    conversion gets its own scanner and style state, so one instance can
    convert any number of independent inputs in turn.
    """

    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()
        self.renderer = HtmlRenderer(
            use_classes=self.options.use_classes,
            class_prefix=self.options.class_prefix,
            no_styles=self.options.no_styles,
        )

    def convert(self, data: bytes) -> bytes:
        """Convert an in-memory buffer."""
        out = io.BytesIO()
        self.convert_stream(io.BytesIO(data), out)
        return out.getvalue()

    def convert_stream(self, source: BinaryIO, sink: Sink) -> None:
        """
        Convert everything readable from ``source`` and write HTML to ``sink``.

        Raises:
            SourceReadError: reading ``source`` failed
            SinkWriteError: writing ``sink`` failed
        """
        writer = HtmlWriter(sink, self.renderer)
        interpreter = SgrInterpreter(on_change=writer.set_style)
        scanner = Scanner(source, writer)
        scanner.scan_with_buffer(bytearray(self.options.buffer_size), interpreter)
        try:
            writer.close()
        except OSError as exc:
            raise SinkWriteError(exc) from exc


def convert(data: bytes) -> bytes:
    """Convert ANSI-coded bytes to HTML with inline styles."""
    return Converter().convert(data)


def convert_with_classes(data: bytes, class_prefix: str = "", no_styles: bool = False) -> bytes:
    """Convert ANSI-coded bytes to HTML with semantic class names."""
    options = RenderOptions().with_classes(prefix=class_prefix, no_styles=no_styles)
    return Converter(options).convert(data)


def convert_stream(source: BinaryIO, sink: Sink, options: Optional[RenderOptions] = None) -> None:
    """Convert a binary stream, writing HTML to ``sink`` as input is read."""
    Converter(options).convert_stream(source, sink)


def html_document(body: bytes, options: Optional[RenderOptions] = None, title: str = "") -> bytes:
    """Wrap converted HTML in a standalone document."""
    options = options or RenderOptions()
    styles = stylesheet(options.class_prefix, selector="pre.ansi") if options.use_classes else ""
    head, tail = DOCUMENT_TEMPLATE.split("{body}")
    head = head.format(
        title=escape_html(title.encode('utf-8')).decode('utf-8'),
        styles=styles,
    )
    return head.encode('utf-8') + body + tail.encode('utf-8')


def convert_file(
    source: str | Path,
    dest: str | Path | None = None,
    options: Optional[RenderOptions] = None,
    document: bool = False,
) -> Path:
    """
    Convert a file and write the HTML next to it.

    Args:
        source: Path to a file containing ANSI-coded text
        dest: Output path (default: source with a .html suffix)
        options: Rendering options
        document: Wrap the output in a full HTML page

    Returns:
        Path of the written file
    """
    source = Path(source)
    dest = Path(dest) if dest is not None else source.with_suffix(".html")

    with open(source, 'rb') as f:
        out = io.BytesIO()
        convert_stream(f, out, options)

    body = out.getvalue()
    if document:
        body = html_document(body, options, title=source.name)

    dest.write_bytes(body)
    logger.debug("Converted %s -> %s (%d bytes)", source, dest, len(body))
    return dest
