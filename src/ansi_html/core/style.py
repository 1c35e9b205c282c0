"""StyleState - the graphic rendition active for a run of text."""

from dataclasses import dataclass, replace
from enum import Enum

from ansi_html.core.color import Color


class Intensity(Enum):
    NORMAL = "normal"
    BOLD = "bold"
    FAINT = "faint"


class FontStyle(Enum):
    """Italic and Fraktur share a slot: SGR 23 clears both."""
    NORMAL = "normal"
    ITALIC = "italic"
    FRAKTUR = "fraktur"


class Underline(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class Blink(Enum):
    NONE = "none"
    SLOW = "slow"
    FAST = "fast"


class Baseline(Enum):
    NONE = "none"
    SUPER = "super"
    SUB = "sub"


@dataclass(frozen=True)
class StyleState:
    """
    Complete set of text attributes at one point in the stream.

    Every field always has a value; ``StyleState()`` is the reset state.
    Instances are immutable, so runs can hold a reference to the state
    they were written under and compare states with ``==``.
    """
    intensity: Intensity = Intensity.NORMAL
    font_style: FontStyle = FontStyle.NORMAL
    underline: Underline = Underline.NONE
    blink: Blink = Blink.NONE
    inverted: bool = False
    hidden: bool = False
    strikethrough: bool = False
    overline: bool = False
    font: int = 0  # 0 = primary font, 1-9 = alternate fonts
    proportional: bool = False
    baseline: Baseline = Baseline.NONE
    foreground: Color = Color.UNSET
    background: Color = Color.UNSET
    underline_color: Color = Color.UNSET

    def is_default(self) -> bool:
        """Check if this is the reset state."""
        return self == DEFAULT_STYLE

    def evolve(self, **changes) -> "StyleState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_STYLE = StyleState()
