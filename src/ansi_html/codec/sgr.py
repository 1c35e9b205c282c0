"""SGR (Select Graphic Rendition) interpreter."""

import logging
import re
from typing import Callable, Optional

from ansi_html.codec.scanner import EscapeEvent
from ansi_html.core.color import Color
from ansi_html.core.constants import SGR_FINAL
from ansi_html.core.style import (
    DEFAULT_STYLE,
    Baseline,
    Blink,
    FontStyle,
    Intensity,
    StyleState,
    Underline,
)

logger = logging.getLogger(__name__)

# Parameters of a CSI sequence that selects graphic rendition: ESC [ params m
SGR_PARAMS = re.compile(rb"[0-9;]*")

# Tokens longer than this are already far past any meaningful value
_MAX_DIGITS = 9
_SATURATED = 10 ** _MAX_DIGITS
_MALFORMED = -1

# Code -> field changes for every code that sets a plain attribute
_ATTRIBUTE_CODES: dict[int, dict[str, object]] = {
    1: {"intensity": Intensity.BOLD},
    2: {"intensity": Intensity.FAINT},
    22: {"intensity": Intensity.NORMAL},
    3: {"font_style": FontStyle.ITALIC},
    20: {"font_style": FontStyle.FRAKTUR},
    23: {"font_style": FontStyle.NORMAL},
    4: {"underline": Underline.SINGLE},
    21: {"underline": Underline.DOUBLE},
    24: {"underline": Underline.NONE},
    5: {"blink": Blink.SLOW},
    6: {"blink": Blink.FAST},
    25: {"blink": Blink.NONE},
    7: {"inverted": True},
    27: {"inverted": False},
    8: {"hidden": True},
    28: {"hidden": False},
    9: {"strikethrough": True},
    29: {"strikethrough": False},
    26: {"proportional": True},
    50: {"proportional": False},
    51: {"overline": True},
    53: {"overline": True},
    55: {"overline": False},
    39: {"foreground": Color.UNSET},
    49: {"background": Color.UNSET},
    59: {"underline_color": Color.UNSET},
    73: {"baseline": Baseline.SUPER},
    74: {"baseline": Baseline.SUB},
    75: {"baseline": Baseline.NONE},
}

# 10 = primary font, 11-19 = alternate fonts 1-9
for _code in range(10, 20):
    _ATTRIBUTE_CODES[_code] = {"font": _code - 10}

for _base, _field in ((30, "foreground"), (40, "background"), (90, "foreground"), (100, "background")):
    for _code in range(_base, _base + 8):
        _ATTRIBUTE_CODES[_code] = {_field: Color.from_sgr(_code)}

# Codes followed by a 5;n or 2;r;g;b sub-form
_EXTENDED_COLOR_CODES: dict[int, str] = {
    38: "foreground",
    48: "background",
    58: "underline_color",
}


def parse_sgr_params(params: bytes) -> list[int]:
    """
    Split an SGR parameter string into integers.

    Empty tokens count as 0. Oversized numbers saturate at a large value
    instead of being parsed digit by digit; tokens that are not numbers
    become -1, which no code or sub-form accepts.
    """
    values: list[int] = []
    for token in params.split(b';'):
        if not token:
            values.append(0)
        elif not token.isdigit():
            values.append(_MALFORMED)
        elif len(token.lstrip(b'0')) > _MAX_DIGITS:
            values.append(_SATURATED)
        else:
            values.append(int(token))
    return values


def _component(values: list[int], index: int) -> int:
    """Color component at ``index``, clamped to 0-255; missing is 0."""
    if index >= len(values):
        return 0
    return max(0, min(values[index], 255))


def _extended_color(values: list[int], index: int) -> tuple[Optional[Color], int]:
    """
    Read a 38/48/58 sub-form starting at ``index``.

    Returns the color (None if the sub-form is missing or unknown) and
    the number of tokens consumed.
    """
    if index >= len(values):
        return None, 0
    mode = values[index]
    if mode == 5:
        return Color.indexed(_component(values, index + 1)), 2
    if mode == 2:
        r, g, b = (_component(values, index + k) for k in (1, 2, 3))
        return Color.rgb(r, g, b), 4
    return None, 0


def apply_sgr(params: bytes, state: StyleState) -> StyleState:
    """
    Apply an SGR parameter string to ``state`` and return the new state.

    Codes are applied left to right. Unknown codes are ignored. A 38, 48
    or 58 without a valid 5 or 2 sub-form ends processing of the list.
    """
    values = parse_sgr_params(params)
    changes: dict[str, object] = {}

    i = 0
    while i < len(values):
        code = values[i]

        if code == 0:
            state = DEFAULT_STYLE
            changes.clear()
        elif code in _EXTENDED_COLOR_CODES:
            color, consumed = _extended_color(values, i + 1)
            if color is None:
                logger.debug("Ignoring SGR %d without a color sub-form", code)
                break
            changes[_EXTENDED_COLOR_CODES[code]] = color
            i += consumed
        elif code in _ATTRIBUTE_CODES:
            changes.update(_ATTRIBUTE_CODES[code])

        i += 1

    if changes:
        state = state.evolve(**changes)
    return state


def is_sgr(event: EscapeEvent) -> bool:
    """True if the event is a CSI sequence selecting graphic rendition."""
    return (
        event.csi_final == SGR_FINAL
        and not event.csi_intermediates
        and SGR_PARAMS.fullmatch(event.csi_parameters) is not None
    )


class SgrInterpreter:
    """
    Escape handler that keeps the running StyleState.

    Pass an instance as the scanner's handler. Non-SGR sequences are
    ignored. ``on_change`` is called with the new state whenever an SGR
    sequence changes it.
    """

    def __init__(
        self,
        state: StyleState = DEFAULT_STYLE,
        on_change: Optional[Callable[[StyleState], None]] = None,
    ):
        self.state = state
        self.on_change = on_change

    def __call__(self, final_byte: int, intermediate_bytes: bytes, parameter_bytes: bytes) -> None:
        self.handle(EscapeEvent(final_byte, intermediate_bytes, parameter_bytes))

    def handle(self, event: EscapeEvent) -> None:
        """Apply one escape event."""
        if not is_sgr(event):
            logger.debug("Ignoring non-SGR sequence %r", event)
            return
        self._set_state(apply_sgr(event.csi_parameters, self.state))

    def reset(self) -> None:
        self._set_state(DEFAULT_STYLE)

    def _set_state(self, new_state: StyleState) -> None:
        if new_state != self.state:
            self.state = new_state
            if self.on_change is not None:
                self.on_change(new_state)
