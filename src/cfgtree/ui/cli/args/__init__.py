"""Command line argument handling package."""

from cfgtree.ui.cli.args.parser import ArgumentParser
from cfgtree.ui.cli.args.options import (
    CLIArgs,
    DeleteArgs,
    InitContextArgs,
    ShowArgs,
    WriteArgs,
    WriteCollectionArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "DeleteArgs",
    "InitContextArgs",
    "ShowArgs",
    "WriteArgs",
    "WriteCollectionArgs",
]
