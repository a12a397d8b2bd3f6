"""Transfer records handed from the configuration writer to resource persistence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

# Labels must stay bit-exact for compatibility with previously written stores.
ITEM_LABEL_PREFIX: Final[str] = "item"


def item_label(index: int) -> str:
    """Return the positional label of the collection item at ``index``."""
    if index < 0:
        raise ValueError(f"Collection index must not be negative: {index}")
    return f"{ITEM_LABEL_PREFIX}{index}"


@dataclass(frozen=True, slots=True)
class PersistData:
    """Scalar properties of one configuration node."""

    properties: Mapping[str, Any]
    collection_item_name: str | None = None


@dataclass(frozen=True, slots=True)
class CollectionPersistData:
    """Items of one configuration collection, in caller order."""

    items: tuple[PersistData, ...] = field(default_factory=tuple)
    properties: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        _ = self.labeled_items()

    def labeled_items(self) -> list[tuple[str, PersistData]]:
        """Return each item paired with its label, in caller order.

        Raises:
            ValueError: If an item carries no collection item name.
        """
        labeled: list[tuple[str, PersistData]] = []
        for item in self.items:
            label = item.collection_item_name
            if not label:
                raise ValueError("Collection items require a collection item name")
            labeled.append((label, item))
        return labeled


__all__ = ["CollectionPersistData", "ITEM_LABEL_PREFIX", "PersistData", "item_label"]
