"""Command line interface package."""

from cfgtree.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
