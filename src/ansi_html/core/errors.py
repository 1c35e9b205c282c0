"""Exceptions raised while converting a stream.

Malformed escape sequences are never errors; only the caller's buffer and
the underlying source and sink can fail a conversion.
"""


class AnsiHtmlError(Exception):
    """Base class for all conversion errors."""


class EmptyBufferError(AnsiHtmlError, ValueError):
    """The working buffer passed to the scanner has no room."""

    def __init__(self, message: str = "buffer must not be empty"):
        super().__init__(message)


class SourceReadError(AnsiHtmlError, IOError):
    """Reading from the source stream failed."""

    def __init__(self, cause: BaseException):
        super().__init__(f"error reading from source: {cause}")
        self.cause = cause


class SinkWriteError(AnsiHtmlError, IOError):
    """Writing literal text to the sink failed."""

    def __init__(self, cause: BaseException):
        super().__init__(f"error writing to sink: {cause}")
        self.cause = cause
