"""Strip escape sequences, keeping only literal text."""

import io

from ansi_html.codec.scanner import Scanner


def strip_ansi(data: bytes) -> bytes:
    """Return ``data`` with every escape sequence removed."""
    out = io.BytesIO()
    scanner = Scanner(None, out)
    scanner.feed(data)
    scanner.finish()
    return out.getvalue()
