"""Nodes of the project tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .consts import TreeItemType


@dataclass(eq=False)
class ProTreeItem:
    """A node in the project tree, linked to its root and siblings."""

    name: str
    path: str
    item_type: TreeItemType = TreeItemType.PRO
    parent: Optional[ProTreeItem] = field(default=None, repr=False)
    root: Optional[ProTreeItem] = field(default=None, repr=False)
    prev_item: Optional[ProTreeItem] = field(default=None, repr=False)
    next_item: Optional[ProTreeItem] = field(default=None, repr=False)
    children: list[ProTreeItem] = field(default_factory=list, repr=False)
    icon: Optional[str] = None
    tooltip: str = ""

    def __post_init__(self) -> None:
        if self.root is None:
            self.root = self if self.parent is None else self.parent.root

    def add_child(
        self, name: str, path: str, item_type: TreeItemType = TreeItemType.DIR
    ) -> ProTreeItem:
        """Create a child node under this one and return it."""
        child = ProTreeItem(name, path, item_type, parent=self, root=self.root)
        self.children.append(child)
        return child

    def first_child(self) -> Optional[ProTreeItem]:
        """Return the first child, or None."""
        return self.children[0] if self.children else None

    def last_child(self) -> Optional[ProTreeItem]:
        """Return the last child, or None."""
        return self.children[-1] if self.children else None