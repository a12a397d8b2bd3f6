"""Context initialization command implementation."""

from typing import final, override

from rich.markup import escape

from cfgtree.application.services.context_config import ContextAwareConfig
from cfgtree.features.persistence import ResourceStore
from cfgtree.ui.cli.args.options import InitContextArgs
from cfgtree.ui.cli.commands.executor import CommandExecutor


@final
class InitContextCommand(CommandExecutor[InitContextArgs]):
    """Create a context node, optionally pointing at a separate configuration root."""

    @override
    def run(self, store: ResourceStore, service: ContextAwareConfig) -> None:
        node = service.ensure_context(self.args.context_path, config_ref=self.args.config_ref)
        message = f"[green]Context ready:[/green] {escape(node.path)}"
        if self.args.config_ref:
            message += f" [dim](configuration stored below {escape(self.args.config_ref)})[/dim]"
        self.report(message)
