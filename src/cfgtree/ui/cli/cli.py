"""Command line interface for cfgtree."""

import sys
from typing import final

from cfgtree.features.persistence import ConfigurationError
from cfgtree.platform.logging import logger
from cfgtree.ui.cli.args import ArgumentParser
from cfgtree.ui.cli.args.options import (
    CLIArgs,
    DeleteArgs,
    InitContextArgs,
    ShowArgs,
    WriteArgs,
    WriteCollectionArgs,
)
from cfgtree.ui.cli.commands import (
    CommandExecutor,
    DeleteCommand,
    InitContextCommand,
    ShowCommand,
    WriteCollectionCommand,
    WriteCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            CommandProcessor.build_command(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigurationError as e:
            logger.error("%s", e)
            sys.exit(1)
        except (OSError, ValueError) as e:
            logger.error("Invalid input: %s", e)
            sys.exit(1)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Select the executor for ``args``."""

        if isinstance(args, InitContextArgs):
            return InitContextCommand(args)
        if isinstance(args, WriteArgs):
            return WriteCommand(args)
        if isinstance(args, WriteCollectionArgs):
            return WriteCollectionCommand(args)
        if isinstance(args, ShowArgs):
            return ShowCommand(args)
        assert isinstance(args, DeleteArgs)
        return DeleteCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
