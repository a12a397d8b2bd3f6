"""Configuration delete command implementation."""

from typing import final, override

from rich.markup import escape

from cfgtree.application.services.context_config import ContextAwareConfig
from cfgtree.features.persistence import ResourceStore
from cfgtree.ui.cli.args.options import DeleteArgs
from cfgtree.ui.cli.commands.executor import CommandExecutor


@final
class DeleteCommand(CommandExecutor[DeleteArgs]):
    """Delete a configuration and its subtree."""

    @override
    def run(self, store: ResourceStore, service: ContextAwareConfig) -> None:
        if service.delete_configuration(self.args.context_path, self.args.name):
            self.report(f"[green]Deleted configuration[/green] {escape(self.args.name)}")
        else:
            self.report(f"[yellow]No configuration named[/yellow] {escape(self.args.name)}")
