"""Tests for HTML rendering of styled runs."""

import io

import pytest

from ansi_html.core.color import Color
from ansi_html.core.style import (
    DEFAULT_STYLE,
    Baseline,
    Blink,
    FontStyle,
    Intensity,
    StyleState,
    Underline,
)
from ansi_html.render.css import stylesheet
from ansi_html.render.html import (
    TAG_CACHE_SIZE,
    HtmlRenderer,
    HtmlWriter,
    TextRun,
    coalesce,
    escape_html,
    render,
)
from ansi_html.render.text import strip_ansi

YELLOW = StyleState(foreground=Color.indexed(3))
BOLD = StyleState(intensity=Intensity.BOLD)

EVERYTHING = StyleState(
    intensity=Intensity.BOLD,
    font_style=FontStyle.ITALIC,
    underline=Underline.SINGLE,
    blink=Blink.SLOW,
    inverted=True,
    hidden=True,
    strikethrough=True,
    overline=True,
    proportional=True,
    baseline=Baseline.SUB,
    foreground=Color.indexed(9),
    background=Color.rgb(1, 2, 3),
    underline_color=Color.indexed(200),
)


class TestEscape:
    def test_escapes_markup(self) -> None:
        assert escape_html(b'<a href="x">&</a>') == b'&lt;a href="x"&gt;&amp;&lt;/a&gt;'

    def test_leaves_other_bytes(self) -> None:
        data = "quotes ' \" and ünïcode".encode()
        assert escape_html(data) == data


class TestCoalesce:
    def test_merges_equal_neighbours(self) -> None:
        runs = [TextRun(b"a", BOLD), TextRun(b"b", BOLD), TextRun(b"c"), TextRun(b"d", BOLD)]
        assert coalesce(runs) == [TextRun(b"ab", BOLD), TextRun(b"c"), TextRun(b"d", BOLD)]

    def test_drops_empty_runs(self) -> None:
        assert coalesce([TextRun(b"", BOLD), TextRun(b"x")]) == [TextRun(b"x")]


class TestInlineMode:
    def test_default_style_has_no_span(self) -> None:
        assert render([TextRun(b"plain <text>")]) == b"plain &lt;text&gt;"

    def test_named_color(self) -> None:
        assert render([TextRun(b"Yellow", YELLOW)]) == b'<span style="color:olive;">Yellow</span>'

    def test_split_run_renders_identically(self) -> None:
        whole = render([TextRun(b"a<b>c", BOLD)])
        split = render([TextRun(b"a<b", BOLD), TextRun(b">c", BOLD)])
        assert whole == split == b'<span style="font-weight:bold;">a&lt;b&gt;c</span>'

    def test_style_changes(self) -> None:
        runs = [TextRun(b"a", BOLD), TextRun(b"b"), TextRun(b"c", YELLOW)]
        assert render(runs) == (
            b'<span style="font-weight:bold;">a</span>b<span style="color:olive;">c</span>'
        )

    def test_declaration_order(self) -> None:
        renderer = HtmlRenderer()
        assert renderer.style_declarations(EVERYTHING) == (
            "font-weight:bold;font-style:italic;"
            "text-decoration-line:underline line-through overline;"
            "filter:invert(100%);opacity:0;font-family:sans-serif;vertical-align:sub;"
            "color:red;background-color:rgb(1,2,3);text-decoration-color:rgb(255,0,215);"
        )

    def test_faint_and_superscript(self) -> None:
        state = StyleState(intensity=Intensity.FAINT, baseline=Baseline.SUPER)
        assert HtmlRenderer().open_tag(state) == b'<span style="font-weight:lighter;vertical-align:super;">'

    def test_attributes_without_css_have_no_span(self) -> None:
        state = StyleState(blink=Blink.FAST, font_style=FontStyle.FRAKTUR, font=3)
        assert render([TextRun(b"x", state)]) == b"x"

    def test_alternate_font_hides_proportional(self) -> None:
        state = StyleState(proportional=True, font=1)
        assert HtmlRenderer().style_declarations(state) == ""

    @pytest.mark.parametrize("index,css", [
        (0, "black"),
        (3, "olive"),
        (7, "silver"),
        (8, "gray"),
        (15, "white"),
        (16, "rgb(0,0,0)"),
        (21, "rgb(0,0,255)"),
        (196, "rgb(255,0,0)"),
        (231, "rgb(255,255,255)"),
        (232, "rgb(8,8,8)"),
        (255, "rgb(238,238,238)"),
    ])
    def test_palette_colors(self, index: int, css: str) -> None:
        state = StyleState(background=Color.indexed(index))
        assert HtmlRenderer().style_declarations(state) == f"background-color:{css};"


class TestClassMode:
    def test_named_color_class(self) -> None:
        renderer = HtmlRenderer(use_classes=True, class_prefix="p-")
        assert renderer.open_tag(YELLOW) == b'<span class="p-fg-yellow">'

    def test_bright_colors(self) -> None:
        state = StyleState(foreground=Color.indexed(9), background=Color.indexed(12))
        renderer = HtmlRenderer(use_classes=True)
        assert renderer.open_tag(state) == b'<span class="fg-bright-red bg-bright-blue">'

    def test_class_order(self) -> None:
        renderer = HtmlRenderer(use_classes=True)
        assert renderer.class_names(EVERYTHING) == [
            "bold", "italic", "underline", "strikethrough", "overline",
            "slow-blink", "invert", "hide", "proportional", "subscript", "fg-bright-red",
        ]

    def test_unnamed_colors_fall_back_to_style(self) -> None:
        renderer = HtmlRenderer(use_classes=True, class_prefix="x-")
        assert renderer.open_tag(EVERYTHING).endswith(
            b'x-fg-bright-red" style="background-color:rgb(1,2,3);text-decoration-color:rgb(255,0,215);">'
        )

    def test_no_styles_omits_unnamed_colors(self) -> None:
        renderer = HtmlRenderer(use_classes=True, no_styles=True)
        state = StyleState(intensity=Intensity.BOLD, background=Color.rgb(1, 2, 3))
        assert renderer.open_tag(state) == b'<span class="bold">'

    def test_only_unnamed_colors_without_styles(self) -> None:
        state = StyleState(foreground=Color.indexed(100))
        assert render([TextRun(b"x", state)], use_classes=True) == (
            b'<span style="color:rgb(135,135,0);">x</span>'
        )
        assert render([TextRun(b"x", state)], use_classes=True, no_styles=True) == b"x"

    def test_tag_cache_is_bounded(self) -> None:
        renderer = HtmlRenderer()
        for r in range(256):
            for g in range(0, 256, 25):
                renderer.open_tag(StyleState(foreground=Color.rgb(r, g, 0)))
        assert renderer._cached_tag.cache_info().currsize == TAG_CACHE_SIZE
        latest = StyleState(foreground=Color.rgb(255, 250, 0))
        assert renderer.open_tag(latest) == b'<span style="color:rgb(255,250,0);">'

    def test_underline_color_class(self) -> None:
        state = StyleState(underline=Underline.DOUBLE, underline_color=Color.indexed(2), font=4)
        renderer = HtmlRenderer(use_classes=True)
        assert renderer.open_tag(state) == b'<span class="double-underline font-4 ul-green">'


class TestHtmlWriter:
    def test_streaming_matches_batch(self) -> None:
        out = io.BytesIO()
        writer = HtmlWriter(out, HtmlRenderer())
        for style, chunk in ((BOLD, b"a"), (BOLD, b"b"), (DEFAULT_STYLE, b"c"), (YELLOW, b"&")):
            writer.set_style(style)
            writer.write(chunk)
        writer.close()
        expected = render([TextRun(b"ab", BOLD), TextRun(b"c"), TextRun(b"&", YELLOW)])
        assert out.getvalue() == expected

    def test_close_is_idempotent(self) -> None:
        out = io.BytesIO()
        writer = HtmlWriter(out)
        writer.write_run(TextRun(b"x", BOLD))
        writer.close()
        writer.close()
        assert out.getvalue() == b'<span style="font-weight:bold;">x</span>'

    def test_empty_writes_open_nothing(self) -> None:
        out = io.BytesIO()
        writer = HtmlWriter(out, style=BOLD)
        writer.write(b"")
        writer.close()
        assert out.getvalue() == b""


class TestStylesheet:
    def test_prefixed_rules(self) -> None:
        css = stylesheet("x-")
        assert ".x-bold{font-weight:bold}" in css
        assert ".x-fg-yellow{color:olive}" in css
        assert ".x-bg-bright-white{background-color:white}" in css
        assert ".x-underline.x-strikethrough{text-decoration-line:underline line-through}" in css
        assert "@keyframes ansi-blink" in css

    def test_scoped(self) -> None:
        assert "pre.ansi .bold{font-weight:bold}" in stylesheet(selector="pre.ansi")

    def test_covers_every_emitted_class(self) -> None:
        css = stylesheet()
        renderer = HtmlRenderer(use_classes=True)
        states = [
            EVERYTHING,
            StyleState(intensity=Intensity.FAINT, font_style=FontStyle.FRAKTUR, blink=Blink.FAST,
                       underline=Underline.DOUBLE, baseline=Baseline.SUPER, font=9),
        ]
        states += [StyleState(background=Color.indexed(i), underline_color=Color.indexed(i)) for i in range(16)]
        for state in states:
            for name in renderer.class_names(state):
                assert f".{name}{{" in css, name


class TestStripAnsi:
    def test_strips_sequences(self) -> None:
        assert strip_ansi(b"\x1b[1mhi\x1b]0;t\x07!\x1b[0m") == b"hi!"

    def test_keeps_text(self) -> None:
        assert strip_ansi("plain ✓".encode()) == "plain ✓".encode()
