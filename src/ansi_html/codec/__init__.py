"""Escape-sequence scanning and SGR interpretation."""

from ansi_html.codec.scanner import EscapeEvent, ParserCursor, Scanner, ScanState
from ansi_html.codec.sgr import SgrInterpreter, apply_sgr, is_sgr, parse_sgr_params

__all__ = [
    "EscapeEvent",
    "ParserCursor",
    "Scanner",
    "ScanState",
    "SgrInterpreter",
    "apply_sgr",
    "is_sgr",
    "parse_sgr_params",
]
