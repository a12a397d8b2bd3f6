"""Store inspection command implementation."""

from typing import final, override

from cfgtree.application.services.context_config import ContextAwareConfig
from cfgtree.features.persistence import ResourceStore
from cfgtree.ui.cli.args.options import ShowArgs
from cfgtree.ui.cli.commands.executor import CommandExecutor
from cfgtree.ui.cli.display.tree import StoreTreeDisplay


@final
class ShowCommand(CommandExecutor[ShowArgs]):
    """Render the stored subtree below a path."""

    @override
    def run(self, store: ResourceStore, service: ContextAwareConfig) -> None:
        # Output is the point of this command, so --quiet does not apply.
        StoreTreeDisplay(self.console).show(store, self.args.path)
