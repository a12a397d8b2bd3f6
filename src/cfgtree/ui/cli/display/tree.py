"""Render stored resource subtrees as Rich trees."""

from __future__ import annotations

import json
from typing import Any, final

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from cfgtree.config.settings import RESERVED_PROPERTY_PREFIX
from cfgtree.features.persistence import InvalidTargetError, ResourceNode, ResourceStore


@final
class StoreTreeDisplay:
    """Print nodes, their types and their properties below a store path."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        reserved_prefix: str = RESERVED_PROPERTY_PREFIX,
    ) -> None:
        self.console = console or Console()
        self._reserved_prefix = reserved_prefix

    def show(self, store: ResourceStore, path: str) -> None:
        """Print the subtree rooted at ``path``.

        Raises:
            InvalidTargetError: If ``path`` does not resolve to a node.
        """
        self.console.print(self.build(store, path))

    def build(self, store: ResourceStore, path: str) -> Tree:
        """Build the Rich tree for the subtree rooted at ``path``."""

        node = store.resolve(path)
        if node is None:
            raise InvalidTargetError(path)
        tree = Tree(self._node_label(node, root=True), guide_style="dim")
        self._fill(store, node, tree)
        return tree

    def _fill(self, store: ResourceStore, node: ResourceNode, branch: Tree) -> None:
        properties = store.properties(node)
        for key in sorted(properties):
            _ = branch.add(self._property_label(key, properties[key]))
        for child in store.children(node):
            self._fill(store, child, branch.add(self._node_label(child)))

    @staticmethod
    def _node_label(node: ResourceNode, *, root: bool = False) -> Text:
        label = Text(node.path if root else node.name, style="bold cyan")
        label.append(f" ({node.resource_type})", style="dim")
        return label

    def _property_label(self, key: str, value: Any) -> str:
        rendered = escape(json.dumps(value, ensure_ascii=False, default=str))
        if key.startswith(self._reserved_prefix):
            return f"[dim]{escape(key)} = {rendered}[/dim]"
        return f"[green]{escape(key)}[/green] = {rendered}"
