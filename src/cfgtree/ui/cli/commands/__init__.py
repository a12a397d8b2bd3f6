"""Command execution package for CLI."""

from cfgtree.ui.cli.commands.executor import CommandExecutor
from cfgtree.ui.cli.commands.context import InitContextCommand
from cfgtree.ui.cli.commands.write import WriteCollectionCommand, WriteCommand
from cfgtree.ui.cli.commands.show import ShowCommand
from cfgtree.ui.cli.commands.delete import DeleteCommand

__all__ = [
    "CommandExecutor",
    "DeleteCommand",
    "InitContextCommand",
    "ShowCommand",
    "WriteCollectionCommand",
    "WriteCommand",
]
