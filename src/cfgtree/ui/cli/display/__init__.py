"""Display management for CLI interface."""

from cfgtree.ui.cli.display.tree import StoreTreeDisplay

__all__ = ["StoreTreeDisplay"]
