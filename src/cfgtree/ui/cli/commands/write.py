"""Configuration write command implementations."""

from typing import final, override

from rich.markup import escape

from cfgtree.application.services.context_config import ContextAwareConfig
from cfgtree.features.persistence import ResourceStore
from cfgtree.ui.cli.args.options import WriteArgs, WriteCollectionArgs
from cfgtree.ui.cli.commands.executor import CommandExecutor
from cfgtree.ui.cli.commands.input_files import load_collection, load_mapping


@final
class WriteCommand(CommandExecutor[WriteArgs]):
    """Write one configuration mapping for a context."""

    @override
    def run(self, store: ResourceStore, service: ContextAwareConfig) -> None:
        values = load_mapping(self.args.input_path)
        writer = service.writer(self.args.context_path)
        writer.write_configuration(self.args.name, values)
        self.report(
            f"[green]Wrote configuration[/green] {escape(self.args.name)} "
            f"→ {escape(writer.resource_path(self.args.name))}"
        )


@final
class WriteCollectionCommand(CommandExecutor[WriteCollectionArgs]):
    """Replace one configuration collection for a context."""

    @override
    def run(self, store: ResourceStore, service: ContextAwareConfig) -> None:
        items, properties = load_collection(self.args.input_path)
        writer = service.writer(self.args.context_path)
        writer.write_configuration_collection(self.args.name, items, properties)
        self.report(
            f"[green]Wrote {len(items)} item(s) of collection[/green] {escape(self.args.name)} "
            f"→ {escape(writer.collection_parent_path(self.args.name))}"
        )
