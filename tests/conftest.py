"""Shared fixtures for scanner and conversion tests."""

import io
from pathlib import Path
from typing import Callable, Optional

import pytest

from ansi_html.codec.scanner import Scanner

ScanResult = tuple[bytes, list[tuple[int, bytes, bytes]]]

SAMPLE_LOG = (
    b"\x1b]0;build\x07"
    b"\x1b[1mStep 1/3\x1b[0m : compiling <main.c>\n"
    b"\x1b[32m  ok\x1b[39m  \x1b[2m(0.4s)\x1b[22m\n"
    b"\x1b[1;31merror:\x1b[0m undefined reference & \x1b[38;5;208mwarning\x1b[m\n"
)


def scan_bytes(data: bytes, buffer_size: Optional[int] = None) -> ScanResult:
    """Scan ``data`` and return the literal output and every escape event."""
    out = io.BytesIO()
    events: list[tuple[int, bytes, bytes]] = []

    def handler(final_byte: int, intermediates: bytes, parameters: bytes) -> None:
        events.append((final_byte, intermediates, parameters))

    scanner = Scanner(io.BytesIO(data), out)
    if buffer_size is None:
        scanner.scan(handler)
    else:
        scanner.scan_with_buffer(bytearray(buffer_size), handler)
    return out.getvalue(), events


@pytest.fixture
def scan() -> Callable[..., ScanResult]:
    """Fixture exposing :func:`scan_bytes`."""
    return scan_bytes


@pytest.fixture
def sample_log(tmp_path: Path) -> Path:
    """A small captured build log on disk."""
    path = tmp_path / "build.log"
    path.write_bytes(SAMPLE_LOG)
    return path
