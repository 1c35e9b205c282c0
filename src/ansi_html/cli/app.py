"""Typer CLI application."""

import io
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def _configure_logging(verbose: bool) -> None:
    """Send library debug records through Rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for the CLI. Install with: pip install ansi-html[cli]")

    from ansi_html.core.errors import AnsiHtmlError
    from ansi_html.core.options import RenderOptions

    app = typer.Typer(
        name="ansi-html",
        help="Convert ANSI-colored terminal output to HTML.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def fail(message: str) -> None:
        console.print(f"[red]{escape(message)}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log discarded sequences")] = False,
    ) -> None:
        _configure_logging(verbose)

    @app.command()
    def convert(
        source: Annotated[str, typer.Argument(help="ANSI file to convert, or - for stdin")],
        dest: Annotated[Optional[Path], typer.Argument(help="Output file (default: stdout)")] = None,
        classes: Annotated[bool, typer.Option("--classes", "-c", help="Emit class names instead of inline styles")] = False,
        prefix: Annotated[str, typer.Option("--prefix", "-p", help="Prefix for class names")] = "",
        no_styles: Annotated[bool, typer.Option("--no-styles", help="Class mode: omit colors that have no class")] = False,
        document: Annotated[bool, typer.Option("--document", "-d", help="Wrap output in a full HTML page")] = False,
        buffer_size: Annotated[int, typer.Option("--buffer-size", "-b", help="Read size in bytes")] = 4096,
    ) -> None:
        """Convert ANSI text to HTML."""
        from ansi_html.io.converter import Converter, html_document

        try:
            options = RenderOptions(
                use_classes=classes,
                class_prefix=prefix,
                no_styles=no_styles,
                buffer_size=buffer_size,
            )
        except ValueError as exc:
            fail(str(exc))

        converter = Converter(options)
        try:
            with ExitStack() as stack:
                src = sys.stdin.buffer if source == "-" else stack.enter_context(open(source, "rb"))
                out = sys.stdout.buffer if dest is None else stack.enter_context(open(dest, "wb"))
                if document:
                    # The page wraps the body, so collect it before writing
                    buffered = io.BytesIO()
                    converter.convert_stream(src, buffered)
                    title = "stdin" if source == "-" else Path(source).name
                    out.write(html_document(buffered.getvalue(), options, title=title))
                else:
                    converter.convert_stream(src, out)
                out.flush()
        except (AnsiHtmlError, OSError) as exc:
            fail(f"Cannot convert {source}: {exc}")

        if dest is not None:
            console.print(f"[green]Converted {escape(source)} → {escape(str(dest))}[/]")

    @app.command()
    def css(
        prefix: Annotated[str, typer.Option("--prefix", "-p", help="Prefix for class names")] = "",
        selector: Annotated[str, typer.Option("--selector", "-s", help="Ancestor selector to scope rules")] = "",
    ) -> None:
        """Print the stylesheet for --classes output."""
        from ansi_html.render.css import stylesheet

        sys.stdout.write(stylesheet(prefix, selector=selector))

    @app.command()
    def strip(
        source: Annotated[str, typer.Argument(help="ANSI file, or - for stdin")],
    ) -> None:
        """Print the text with every escape sequence removed."""
        from ansi_html.render.text import strip_ansi

        try:
            data = sys.stdin.buffer.read() if source == "-" else Path(source).read_bytes()
        except OSError as exc:
            fail(f"Cannot read {source}: {exc}")
        sys.stdout.buffer.write(strip_ansi(data))
        sys.stdout.buffer.flush()

    return app
