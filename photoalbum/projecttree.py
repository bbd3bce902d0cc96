"""The project tree and the dialog hosting it."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Callable, Optional, Sequence

from .consts import TreeItemType
from .treeitem import ProTreeItem

logger = logging.getLogger(__name__)

PROJECT_ICON = ":/icons/dir.png"
HEADER_LABELS = ("项目名称", "路径")


class ContextAction(Enum):
    """Entries of the context menu offered on a project node."""

    IMPORT = ("导入文件", ":/icons/import.png")
    SET_ACTIVE = ("设置活动项目", ":/icons/core.png")
    CLOSE_PROJECT = ("关闭项目", ":/icons/close.png")
    SLIDE_SHOW = ("轮播图播放", ":/icons/slideshow.png")

    def __init__(self, label: str, icon: str) -> None:
        self.label = label
        self.icon = icon


class ProjectTree:
    """Holds the top-level project nodes, one per project directory."""

    def __init__(self) -> None:
        self.items: list[ProTreeItem] = []
        self.right_button_item: Optional[ProTreeItem] = None
        self._paths: set[str] = set()

    @property
    def paths(self) -> frozenset[str]:
        """Full paths of the projects already in the tree."""
        return frozenset(self._paths)

    def add_project(self, name: str, path: str) -> Optional[ProTreeItem]:
        """Add a project, creating its directory if needed.

        Returns the new node, or None when the project is already present
        or its directory could not be created.
        """
        file_path = os.path.join(os.path.abspath(path), name)
        if file_path in self._paths:
            return None
        if not os.path.isdir(file_path):
            try:
                os.makedirs(file_path, exist_ok=True)
            except OSError:
                return None
        self._paths.add(file_path)
        item = ProTreeItem(name, file_path, TreeItemType.PRO)
        item.icon = PROJECT_ICON
        item.tooltip = file_path
        self.items.append(item)
        return item

    def on_item_pressed(
        self, item: Optional[ProTreeItem], right_button: bool
    ) -> Optional[list[ContextAction]]:
        """Handle a press on a node; return the context menu for a right click on a project."""
        if not right_button or item is None:
            return None
        if item.item_type != TreeItemType.PRO:
            return None
        self.right_button_item = item
        return list(ContextAction)

    def import_directory(
        self, chooser: Callable[[str], Sequence[str]]
    ) -> Optional[str]:
        """Ask ``chooser`` for directories to import, starting at the selected project.

        Returns the first chosen directory, or None.
        """
        item = self.right_button_item
        if item is None:
            return None
        selected = chooser(item.path)
        if not selected:
            return None
        import_path = selected[0]
        logger.debug("import %s", import_path)
        return import_path


class ProjectTreeDialog:
    """Panel showing the project tree."""

    header_labels = HEADER_LABELS

    def __init__(self, tree: Optional[ProjectTree] = None) -> None:
        self.tree = tree if tree is not None else ProjectTree()

    def recv_pro_setting(self, name: str, path: str) -> Optional[ProTreeItem]:
        """Receive the settings of a newly created project."""
        return self.tree.add_project(name, path)