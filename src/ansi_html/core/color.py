"""Color representation for styled terminal text."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ansi_html.core.constants import (
    COLOR_NAMES,
    CSS_COLOR_KEYWORDS,
    CUBE_LEVELS,
)


class ColorMode(Enum):
    """How a color value was specified."""
    UNSET = "unset"         # Terminal default (SGR 39, 49, 59)
    INDEXED = "indexed"     # Palette index 0-255 (SGR 30-37, 90-97, 38;5;n)
    RGB = "rgb"             # 24-bit true color (SGR 38;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A foreground, background, or underline color.

    Palette indices 0-15 are the named colors; 16-255 come from the
    xterm 256-color palette. Components are always in range, callers
    saturate before constructing.
    """
    mode: ColorMode = ColorMode.UNSET
    value: int | tuple[int, int, int] = 0

    UNSET: ClassVar["Color"]

    @classmethod
    def indexed(cls, index: int) -> "Color":
        """Create a palette color."""
        if not 0 <= index <= 255:
            raise ValueError(f"Palette index must be 0-255, got {index}")
        return cls(ColorMode.INDEXED, index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a true color."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.RGB, (r, g, b))

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from a basic SGR code (30-37, 40-47, 90-97, 100-107)."""
        if 30 <= code <= 37:
            return cls(ColorMode.INDEXED, code - 30)
        elif 40 <= code <= 47:
            return cls(ColorMode.INDEXED, code - 40)
        elif 90 <= code <= 97:
            return cls(ColorMode.INDEXED, code - 90 + 8)
        elif 100 <= code <= 107:
            return cls(ColorMode.INDEXED, code - 100 + 8)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @property
    def is_set(self) -> bool:
        return self.mode is not ColorMode.UNSET

    @property
    def is_named(self) -> bool:
        """True for the 16 colors that have a semantic name."""
        return self.mode is ColorMode.INDEXED and self.value < 16

    @property
    def name(self) -> str | None:
        """Semantic name (``yellow``, ``bright-red``) or None."""
        if not self.is_named:
            return None
        assert isinstance(self.value, int)
        return COLOR_NAMES[self.value]

    def to_rgb(self) -> tuple[int, int, int]:
        """Resolve to an RGB triple."""
        if self.mode is ColorMode.RGB:
            assert isinstance(self.value, tuple)
            return self.value
        if self.mode is ColorMode.INDEXED:
            assert isinstance(self.value, int)
            return palette_rgb(self.value)
        raise ValueError("Unset color has no RGB value")

    def to_css(self) -> str:
        """Return a CSS color value: a keyword for named colors, else rgb()."""
        if self.is_named:
            assert isinstance(self.value, int)
            return CSS_COLOR_KEYWORDS[self.value]
        r, g, b = self.to_rgb()
        return f"rgb({r},{g},{b})"


# RGB values of the 16 named colors, matching CSS_COLOR_KEYWORDS
NAMED_RGB: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (128, 0, 0),
    (0, 128, 0),
    (128, 128, 0),
    (0, 0, 128),
    (128, 0, 128),
    (0, 128, 128),
    (192, 192, 192),
    (128, 128, 128),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)


def palette_rgb(index: int) -> tuple[int, int, int]:
    """
    Resolve a 256-color palette index to RGB.

    0-15 are the named colors, 16-231 a 6x6x6 cube, 232-255 a
    24-step grayscale ramp from 8 to 238.
    """
    if not 0 <= index <= 255:
        raise ValueError(f"Palette index must be 0-255, got {index}")
    if index < 16:
        return NAMED_RGB[index]
    if index < 232:
        i = index - 16
        return (CUBE_LEVELS[i // 36], CUBE_LEVELS[(i // 6) % 6], CUBE_LEVELS[i % 6])
    gray = 8 + (index - 232) * 10
    return (gray, gray, gray)


Color.UNSET = Color()
