"""Shared constants for escape-sequence scanning and HTML rendering."""

# Control bytes
ESC = 0x1B
BEL = 0x07
CSI_INTRODUCER = ord('[')
OSC_INTRODUCER = ord(']')
ST_FINAL = ord('\\')
SGR_FINAL = ord('m')

# Byte classes (ECMA-48 section 5.4)
INTERMEDIATE_BYTES = range(0x20, 0x30)
PARAMETER_BYTES = range(0x30, 0x40)
FINAL_BYTES = range(0x40, 0x7F)
ESCAPE_FINAL_BYTES = range(0x30, 0x7F)

# UTF-8 encodes the C1 controls U+0080-U+009F as 0xC2 followed by 0x80-0x9F
C1_LEAD_BYTE = 0xC2
C1_CONTROLS = range(0x80, 0xA0)
C1_OFFSET = 0x40

DEFAULT_BUFFER_SIZE = 4096

# Standard 16-color names, used for semantic class tokens
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright-black",
    "bright-red",
    "bright-green",
    "bright-yellow",
    "bright-blue",
    "bright-magenta",
    "bright-cyan",
    "bright-white",
)

# CSS keywords for the same 16 colors (VGA palette)
CSS_COLOR_KEYWORDS: tuple[str, ...] = (
    "black",    # 0
    "maroon",   # 1
    "green",    # 2
    "olive",    # 3
    "navy",     # 4
    "purple",   # 5
    "teal",     # 6
    "silver",   # 7
    "gray",     # 8
    "red",      # 9
    "lime",     # 10
    "yellow",   # 11
    "blue",     # 12
    "fuchsia",  # 13
    "aqua",     # 14
    "white",    # 15
)

# Channel levels of the 6x6x6 color cube (indices 16-231)
CUBE_LEVELS: tuple[int, ...] = (0, 95, 135, 175, 215, 255)
