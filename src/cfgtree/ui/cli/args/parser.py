"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from cfgtree.config.config import Config
from cfgtree.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from cfgtree.ui.cli.args.options import (
    CLIArgs,
    DeleteArgs,
    InitContextArgs,
    ShowArgs,
    WriteArgs,
    WriteCollectionArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="cfgtree - Write context-aware configuration into a hierarchical resource store.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        init_parser = subparsers.add_parser(
            "init-context",
            help="Create a context node that configuration can be written for",
        )
        ArgumentParser._add_common_options(init_parser)
        _ = init_parser.add_argument(
            "context_path",
            type=str,
            help="Store path of the context node",
            metavar="CONTEXT_PATH",
        )
        _ = init_parser.add_argument(
            "--config-ref",
            type=str,
            help="Store configuration of this context below another path",
            metavar="REF",
        )

        write_parser = subparsers.add_parser(
            "write",
            help="Write a configuration from a TOML or JSON mapping",
        )
        ArgumentParser._add_common_options(write_parser)
        ArgumentParser._add_target_arguments(write_parser)
        _ = write_parser.add_argument(
            "input_path",
            type=str,
            help="TOML or JSON file holding the configuration mapping",
            metavar="FILE",
        )

        collection_parser = subparsers.add_parser(
            "write-collection",
            help="Replace a configuration collection from a JSON list or TOML items table",
        )
        ArgumentParser._add_common_options(collection_parser)
        ArgumentParser._add_target_arguments(collection_parser)
        _ = collection_parser.add_argument(
            "input_path",
            type=str,
            help="JSON list of mappings, or TOML file with an [[items]] array",
            metavar="FILE",
        )

        show_parser = subparsers.add_parser(
            "show",
            help="Render the stored subtree below a path",
        )
        ArgumentParser._add_common_options(show_parser)
        _ = show_parser.add_argument(
            "path",
            type=str,
            nargs="?",
            default="/",
            help="Store path to render (defaults to the root)",
            metavar="PATH",
        )

        delete_parser = subparsers.add_parser(
            "delete",
            help="Delete a configuration and everything below it",
        )
        ArgumentParser._add_common_options(delete_parser)
        ArgumentParser._add_target_arguments(delete_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If an input file does not exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        db_path = Path(parsed_args.db) if parsed_args.db else configuration.db_path
        command: str = parsed_args.command

        if command == "init-context":
            return InitContextArgs(
                command="init-context",
                db_path=db_path,
                verbose=is_verbose,
                quiet=is_quiet,
                context_path=parsed_args.context_path,
                config_ref=parsed_args.config_ref,
            )

        if command in {"write", "write-collection"}:
            return ArgumentParser._process_write(parsed_args, db_path)

        if command == "show":
            return ShowArgs(
                command="show",
                db_path=db_path,
                verbose=is_verbose,
                quiet=is_quiet,
                path=parsed_args.path,
            )

        if command == "delete":
            return DeleteArgs(
                command="delete",
                db_path=db_path,
                verbose=is_verbose,
                quiet=is_quiet,
                context_path=parsed_args.context_path,
                name=parsed_args.name,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_common_options(parser: argparse.ArgumentParser) -> None:
        """Apply the options shared by every subcommand."""

        _ = parser.add_argument(
            "--db",
            type=str,
            help="SQLite store to operate on (defaults to the configured store)",
            metavar="DB_PATH",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
        """Apply the context and configuration name positionals."""

        _ = parser.add_argument(
            "context_path",
            type=str,
            help="Store path of the context node",
            metavar="CONTEXT",
        )
        _ = parser.add_argument(
            "name",
            type=str,
            help="Logical configuration name",
            metavar="NAME",
        )

    @staticmethod
    def _process_write(
        parsed_args: argparse.Namespace,
        db_path: Path | None,
    ) -> WriteArgs | WriteCollectionArgs:
        input_path = Path(parsed_args.input_path)
        if not input_path.is_file():
            logger.error("Input file does not exist: %s", input_path)
            sys.exit(1)

        if parsed_args.command == "write":
            return WriteArgs(
                command="write",
                db_path=db_path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                context_path=parsed_args.context_path,
                name=parsed_args.name,
                input_path=input_path,
            )

        return WriteCollectionArgs(
            command="write-collection",
            db_path=db_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            context_path=parsed_args.context_path,
            name=parsed_args.name,
            input_path=input_path,
        )
