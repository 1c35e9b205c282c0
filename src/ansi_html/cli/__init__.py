"""Command-line interface (requires the ``cli`` extra)."""
