"""Incremental escape-sequence scanner.

Splits a byte stream into literal text, which is written straight to a
sink, and escape sequences, which are reported to a handler. The scanner
keeps its in-progress sequence in a ParserCursor so input can arrive in
chunks of any size.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Callable, Optional, Protocol

from ansi_html.core.constants import (
    BEL,
    C1_CONTROLS,
    C1_LEAD_BYTE,
    C1_OFFSET,
    CSI_INTRODUCER,
    DEFAULT_BUFFER_SIZE,
    ESC,
    ESCAPE_FINAL_BYTES,
    FINAL_BYTES,
    INTERMEDIATE_BYTES,
    OSC_INTRODUCER,
    PARAMETER_BYTES,
    ST_FINAL,
)
from ansi_html.core.errors import EmptyBufferError, SinkWriteError, SourceReadError

logger = logging.getLogger(__name__)

EscapeHandler = Callable[[int, bytes, bytes], None]


class Sink(Protocol):
    def write(self, data: bytes) -> object: ...


class ScanState(Enum):
    """Scanner states, named after the ECMA-48 sequence being read."""
    GROUND = "ground"
    ESCAPE = "escape"
    ESCAPE_INTERMEDIATE = "escape_intermediate"
    CSI = "csi"
    OSC = "osc"


@dataclass(frozen=True)
class EscapeEvent:
    """
    One recognized escape sequence.

    ``final_byte`` is the byte that completed the escape itself, so a
    control sequence (``ESC [``) reports ``[`` and carries its whole body,
    including the CSI final byte, in ``parameter_bytes``. Operating system
    commands report ``]`` with the terminator included.
    """
    final_byte: int
    intermediate_bytes: bytes = b""
    parameter_bytes: bytes = b""

    @property
    def is_csi(self) -> bool:
        return self.final_byte == CSI_INTRODUCER

    @property
    def csi_final(self) -> int | None:
        """Final byte of a control sequence (``m`` for SGR)."""
        if not self.is_csi or not self.parameter_bytes:
            return None
        return self.parameter_bytes[-1]

    @property
    def csi_parameters(self) -> bytes:
        """Leading parameter bytes (0x30-0x3F) of a control sequence."""
        if not self.is_csi:
            return b""
        end = 0
        for byte in self.parameter_bytes:
            if byte not in PARAMETER_BYTES:
                break
            end += 1
        return self.parameter_bytes[:end]

    @property
    def csi_intermediates(self) -> bytes:
        """Intermediate bytes (0x20-0x2F) between the parameters and final byte."""
        if not self.is_csi:
            return b""
        start = len(self.csi_parameters)
        return self.parameter_bytes[start:-1]


@dataclass
class ParserCursor:
    """In-progress escape sequence, carried across buffer refills."""
    state: ScanState = ScanState.GROUND
    intermediates: bytearray = field(default_factory=bytearray)
    parameters: bytearray = field(default_factory=bytearray)
    seen_intermediate: bool = False  # CSI: parameter bytes no longer allowed
    after_escape: bool = False       # OSC: previous byte was ESC
    pending_lead: bool = False       # 0xC2 seen at end of a chunk

    def begin(self) -> None:
        """Start a new sequence after an ESC or C1 introducer."""
        self.reset()
        self.state = ScanState.ESCAPE

    def reset(self) -> None:
        """Drop any partial sequence and return to ground."""
        self.state = ScanState.GROUND
        self.intermediates.clear()
        self.parameters.clear()
        self.seen_intermediate = False
        self.after_escape = False


class Scanner:
    """
    Pull-based scanner bound to a binary source and a literal-text sink.

    Literal bytes are forwarded to ``sink.write`` as soon as they are known
    not to belong to an escape sequence; a None sink discards them.
    Malformed sequences are dropped silently, together with the byte that
    broke them, even when that byte is another ESC.

    Example:
        >>> out = io.BytesIO()
        >>> Scanner(io.BytesIO(b"a\\x1b[1mb"), out).scan(print)
        91 b'' b'1m'
        >>> out.getvalue()
        b'ab'
    """

    def __init__(self, source: Optional[BinaryIO], sink: Optional[Sink]):
        self.source = source
        self.sink = sink
        self.cursor = ParserCursor()

    def scan(self, handler: Optional[EscapeHandler] = None) -> None:
        """Scan the source to EOF using a default-sized buffer."""
        self.scan_with_buffer(bytearray(DEFAULT_BUFFER_SIZE), handler)

    def scan_with_buffer(
        self,
        buffer: bytearray | memoryview,
        handler: Optional[EscapeHandler] = None,
    ) -> None:
        """
        Scan the source to EOF, refilling ``buffer`` on each read.

        Args:
            buffer: Writable working buffer; its length is the read size
            handler: Called as ``handler(final_byte, intermediates, parameters)``
                for every recognized sequence, or None to discard them

        Raises:
            EmptyBufferError: ``buffer`` has zero length
            SourceReadError: the source raised while reading
            SinkWriteError: the sink raised while writing literal text
        """
        if buffer is None or len(buffer) == 0:
            raise EmptyBufferError()

        view = memoryview(buffer)
        while True:
            count = self._read(view)
            if not count:
                break
            self.feed(view[:count], handler)
        self.finish()

    def feed(self, data: bytes | memoryview, handler: Optional[EscapeHandler] = None) -> None:
        """Process one chunk of input."""
        cursor = self.cursor
        n = len(data)
        i = 0

        if cursor.pending_lead and n:
            cursor.pending_lead = False
            if data[0] in C1_CONTROLS:
                cursor.begin()
                self._advance(data[0] - C1_OFFSET, handler)
                i = 1
            else:
                self._write(bytes((C1_LEAD_BYTE,)))

        start = i
        while i < n:
            byte = data[i]

            if cursor.state is not ScanState.GROUND:
                self._advance(byte, handler)
                i += 1
                start = i
            elif byte == ESC:
                self._write(data[start:i])
                cursor.begin()
                i += 1
                start = i
            elif byte == C1_LEAD_BYTE:
                if i + 1 == n:
                    # Hold the lead byte until the next chunk decides it
                    self._write(data[start:i])
                    cursor.pending_lead = True
                    i += 1
                    start = i
                elif data[i + 1] in C1_CONTROLS:
                    self._write(data[start:i])
                    cursor.begin()
                    self._advance(data[i + 1] - C1_OFFSET, handler)
                    i += 2
                    start = i
                else:
                    i += 1
            else:
                i += 1

        self._write(data[start:n])

    def finish(self) -> None:
        """Flush state at end of stream."""
        cursor = self.cursor
        if cursor.pending_lead:
            cursor.pending_lead = False
            self._write(bytes((C1_LEAD_BYTE,)))
        if cursor.state is not ScanState.GROUND:
            logger.debug("Dropping unterminated %s sequence at end of stream", cursor.state.value)
            cursor.reset()

    def _advance(self, byte: int, handler: Optional[EscapeHandler]) -> None:
        """Consume one byte inside an escape sequence."""
        cursor = self.cursor
        state = cursor.state

        if state is ScanState.ESCAPE:
            if byte == CSI_INTRODUCER:
                cursor.state = ScanState.CSI
            elif byte == OSC_INTRODUCER:
                cursor.state = ScanState.OSC
            elif byte in INTERMEDIATE_BYTES:
                cursor.intermediates.append(byte)
                cursor.state = ScanState.ESCAPE_INTERMEDIATE
            elif byte in ESCAPE_FINAL_BYTES:
                self._dispatch(byte, handler)
            else:
                self._abort(byte)

        elif state is ScanState.ESCAPE_INTERMEDIATE:
            if byte in INTERMEDIATE_BYTES:
                cursor.intermediates.append(byte)
            elif byte in ESCAPE_FINAL_BYTES:
                self._dispatch(byte, handler)
            else:
                self._abort(byte)

        elif state is ScanState.CSI:
            if byte in PARAMETER_BYTES and not cursor.seen_intermediate:
                cursor.parameters.append(byte)
            elif byte in INTERMEDIATE_BYTES:
                cursor.parameters.append(byte)
                cursor.seen_intermediate = True
            elif byte in FINAL_BYTES:
                cursor.parameters.append(byte)
                self._dispatch(CSI_INTRODUCER, handler)
            else:
                self._abort(byte)

        elif state is ScanState.OSC:
            cursor.parameters.append(byte)
            if byte == BEL or (cursor.after_escape and byte == ST_FINAL):
                self._dispatch(OSC_INTRODUCER, handler)
            else:
                cursor.after_escape = byte == ESC

    def _dispatch(self, final_byte: int, handler: Optional[EscapeHandler]) -> None:
        cursor = self.cursor
        intermediates = bytes(cursor.intermediates)
        parameters = bytes(cursor.parameters)
        cursor.reset()
        if handler is not None:
            handler(final_byte, intermediates, parameters)

    def _abort(self, byte: int) -> None:
        cursor = self.cursor
        logger.debug(
            "Discarding malformed %s sequence at byte 0x%02X",
            cursor.state.value,
            byte,
        )
        cursor.reset()

    def _read(self, view: memoryview) -> int:
        # readinto1 returns as soon as a pipe has data instead of filling the buffer
        readinto = getattr(self.source, "readinto1", None) or self.source.readinto
        try:
            count = readinto(view)
        except OSError as exc:
            raise SourceReadError(exc) from exc
        return count or 0

    def _write(self, data: bytes | memoryview) -> None:
        if not data or self.sink is None:
            return
        try:
            self.sink.write(bytes(data))
        except OSError as exc:
            raise SinkWriteError(exc) from exc
