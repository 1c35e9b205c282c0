"""Rendering options shared by the library entry points and the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from ansi_html.core.constants import DEFAULT_BUFFER_SIZE


@dataclass
class RenderOptions:
    """
    How a conversion renders styles and reads its input.

    Example:
        >>> options = (RenderOptions()
        ...     .with_classes(prefix="ansi-")
        ...     .with_buffer_size(1024))
        >>> convert_stream(source, sink, options)
    """

    use_classes: bool = False
    class_prefix: str = ""
    no_styles: bool = False  # Class mode: drop colors that have no class
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")

    def with_classes(self, prefix: str = "", no_styles: bool = False) -> RenderOptions:
        """Switch to class mode."""
        self.use_classes = True
        self.class_prefix = prefix
        self.no_styles = no_styles
        return self

    def with_inline_styles(self) -> RenderOptions:
        """Switch to inline-style mode."""
        self.use_classes = False
        return self

    def with_buffer_size(self, size: int) -> RenderOptions:
        """Set the scanner's read size."""
        if size <= 0:
            raise ValueError(f"buffer_size must be positive, got {size}")
        self.buffer_size = size
        return self
