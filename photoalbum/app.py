"""Main window and command entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from .projectsettings import ProjectSettingsForm
from .projecttree import ProjectTreeDialog
from .wizard import DialogResult, Wizard

logger = logging.getLogger(__name__)

FILE_MENU = "文件(&F)"
SETTINGS_MENU = "设置(&S)"


@dataclass(frozen=True)
class MenuAction:
    """An entry of the main window's menu bar."""

    label: str
    icon: str
    shortcut: str


class MainWindow:
    """The application window: menus plus the project tree panel."""

    def __init__(self, tree_dialog: Optional[ProjectTreeDialog] = None) -> None:
        self.tree_dialog = tree_dialog if tree_dialog is not None else ProjectTreeDialog()
        self._menus = {
            FILE_MENU: (
                MenuAction("创建项目", ":/icons/createpro.png", "Ctrl+N"),
                MenuAction("打开项目", ":/icons/openpro.png", "Ctrl+O"),
            ),
            SETTINGS_MENU: (
                MenuAction("背景音乐", ":/icons/music.png", "Ctrl+M"),
            ),
        }

    def menus(self) -> dict[str, list[MenuAction]]:
        """Return the menus in menu-bar order."""
        return {title: list(actions) for title, actions in self._menus.items()}

    def create_project(self, run_wizard: Callable[[Wizard], object]) -> Optional[int]:
        """Run the creation wizard with the tree connected; return its result."""
        wizard = Wizard(ProjectSettingsForm())
        receiver = self.tree_dialog.recv_pro_setting
        wizard.connect(receiver)
        try:
            run_wizard(wizard)
        finally:
            wizard.disconnect(receiver)
        return wizard.result

    def open_project(self) -> None:
        """Handle the open-project menu entry."""
        logger.debug("openPro")


def main(argv: Optional[list[str]] = None) -> int:
    """Create the named projects and list the project tree."""
    parser = argparse.ArgumentParser(prog="photoalbum", description="Create photo album projects.")
    parser.add_argument("names", nargs="*", help="project names to create")
    parser.add_argument("--path", default=os.getcwd(), help="parent directory of the projects")
    args = parser.parse_args(argv)

    window = MainWindow()
    status = 0

    for name in args.names:
        def run(wizard: Wizard, name: str = name) -> None:
            nonlocal status
            form = wizard.form
            form.name = name
            form.path = args.path
            form.check_input()
            if form.is_complete():
                wizard.done(DialogResult.ACCEPTED)
            else:
                print(f"{name}: {form.tips}", file=sys.stderr)
                status = 1
                wizard.done(DialogResult.REJECTED)

        window.create_project(run)

    for item in window.tree_dialog.tree.items:
        print(f"{item.name}\t{item.path}")
    return status