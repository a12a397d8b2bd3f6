"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class InitContextArgs:
    """Command line arguments for the ``init-context`` subcommand."""

    command: Literal["init-context"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    context_path: str
    config_ref: str | None


@final
@dataclass(slots=True)
class WriteArgs:
    """Command line arguments for the ``write`` subcommand."""

    command: Literal["write"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    context_path: str
    name: str
    input_path: Path


@final
@dataclass(slots=True)
class WriteCollectionArgs:
    """Command line arguments for the ``write-collection`` subcommand."""

    command: Literal["write-collection"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    context_path: str
    name: str
    input_path: Path


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    path: str


@final
@dataclass(slots=True)
class DeleteArgs:
    """Command line arguments for the ``delete`` subcommand."""

    command: Literal["delete"]
    db_path: Path | None
    verbose: bool
    quiet: bool
    context_path: str
    name: str


CLIArgs = InitContextArgs | WriteArgs | WriteCollectionArgs | ShowArgs | DeleteArgs

__all__ = [
    "CLIArgs",
    "DeleteArgs",
    "InitContextArgs",
    "ShowArgs",
    "WriteArgs",
    "WriteCollectionArgs",
]
