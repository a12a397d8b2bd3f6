"""src/cfgtree/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Open the SQLite store once per command and hand it to the application service.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Generic, TypeVar

from rich.console import Console

from cfgtree.application.services.context_config import ContextAwareConfig
from cfgtree.features.persistence import ResourceStore, SqliteResourceStore
from cfgtree.platform.db.db_manager import DatabaseManager
from cfgtree.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    console: Console

    def __init__(
        self,
        args: ArgsT,
        *,
        db_manager_factory: Callable[[Path | None], DatabaseManager] | None = None,
        service_factory: Callable[[ResourceStore], ContextAwareConfig] | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            db_manager_factory: Builds the database manager from the ``--db`` path.
            service_factory: Builds the application service on top of the store.
            console: Console used for command output.
        """
        self.args = args
        self._db_manager_factory = db_manager_factory or DatabaseManager
        self._service_factory = service_factory or ContextAwareConfig
        self.console = console or Console()

    def execute(self) -> None:
        """Open the store, run the command and close the connection again."""

        manager = self._db_manager_factory(self.args.db_path)
        with manager as db_manager:
            store = SqliteResourceStore(db_manager)
            self.run(store, self._service_factory(store))

    @abstractmethod
    def run(self, store: ResourceStore, service: ContextAwareConfig) -> None:
        """Execute the command against an open store.

        Args:
            store: Open resource store.
            service: Application service bound to ``store``.
        """
        pass

    def report(self, message: str) -> None:
        """Print ``message`` unless ``--quiet`` was given."""

        if not self.args.quiet:
            self.console.print(message)
