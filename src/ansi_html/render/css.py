"""Stylesheet for class-mode output."""

from itertools import combinations

from ansi_html.core.color import Color
from ansi_html.core.constants import COLOR_NAMES

# Class name -> declarations, in the order the renderer emits classes
ATTRIBUTE_RULES: dict[str, str] = {
    "bold": "font-weight:bold",
    "faint": "font-weight:lighter",
    "italic": "font-style:italic",
    "fraktur": "font-family:fantasy",
    "underline": "text-decoration-line:underline",
    "double-underline": "text-decoration-line:underline;text-decoration-style:double",
    "strikethrough": "text-decoration-line:line-through",
    "overline": "text-decoration-line:overline",
    "slow-blink": "animation:ansi-blink 1s steps(1) infinite",
    "fast-blink": "animation:ansi-blink 0.3s steps(1) infinite",
    "invert": "filter:invert(100%)",
    "hide": "opacity:0",
    "proportional": "font-family:sans-serif",
    "superscript": "vertical-align:super",
    "subscript": "vertical-align:sub",
}

BLINK_KEYFRAMES = "@keyframes ansi-blink{50%{opacity:0}}"

# Classes that each set text-decoration-line; CSS does not merge them
DECORATION_LINES: tuple[tuple[str, str], ...] = (
    ("underline", "underline"),
    ("double-underline", "underline"),
    ("strikethrough", "line-through"),
    ("overline", "overline"),
)


def _decoration_rules(prefix: str) -> list[str]:
    """Rules for class combinations that share text-decoration-line."""
    rules: list[str] = []
    for size in (2, 3):
        for combo in combinations(DECORATION_LINES, size):
            names = [name for name, _ in combo]
            if "underline" in names and "double-underline" in names:
                continue
            selector = "".join(f".{prefix}{name}" for name in names)
            value = " ".join(line for _, line in combo)
            rules.append(f"{selector}{{text-decoration-line:{value}}}")
    return rules


def stylesheet(class_prefix: str = "", selector: str = "") -> str:
    """
    Build CSS rules for every class that class mode can emit.

    Args:
        class_prefix: Prefix passed to the renderer
        selector: Optional ancestor selector (e.g. ``pre.ansi``) to scope rules

    Returns:
        Stylesheet text, one rule per line
    """
    scope = f"{selector} " if selector else ""
    rules: list[str] = []

    for name, declarations in ATTRIBUTE_RULES.items():
        rules.append(f"{scope}.{class_prefix}{name}{{{declarations}}}")
    rules.extend(f"{scope}{rule}" for rule in _decoration_rules(class_prefix))

    for n in range(1, 10):
        rules.append(f"{scope}.{class_prefix}font-{n}{{font-family:var(--ansi-font-{n},monospace)}}")

    for index, name in enumerate(COLOR_NAMES):
        css = Color.indexed(index).to_css()
        rules.append(f"{scope}.{class_prefix}fg-{name}{{color:{css}}}")
        rules.append(f"{scope}.{class_prefix}bg-{name}{{background-color:{css}}}")
        rules.append(f"{scope}.{class_prefix}ul-{name}{{text-decoration-color:{css}}}")

    rules.append(BLINK_KEYFRAMES)
    return "\n".join(rules) + "\n"
