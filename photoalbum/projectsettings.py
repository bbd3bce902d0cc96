"""Project name and location form with live validation."""

from __future__ import annotations

import os
from typing import Callable, Optional

from .consts import InputStatus

TITLE = "设置项目配置"


def validate_input(name: str, path: str) -> InputStatus:
    """Check a project name and parent directory."""
    name = name.strip()
    path = path.strip()
    if not name or not path:
        return InputStatus.EMPTY_FIELD
    if not os.path.isdir(path):
        return InputStatus.PATH_NOT_EXIST
    if os.path.isdir(os.path.join(os.path.abspath(path), name)):
        return InputStatus.PROJECT_EXISTS
    return InputStatus.VALID


class ProjectSettingsForm:
    """State of the project settings page of the creation wizard."""

    title = TITLE

    def __init__(
        self,
        name: str = "",
        path: Optional[str] = None,
        on_complete_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self.name = name
        self.path = os.getcwd() if path is None else path
        self.tips = ""
        self._on_complete_changed = on_complete_changed

    def validate(self) -> InputStatus:
        """Validate the current input without touching the hint."""
        return validate_input(self.name, self.path)

    def check_input(self) -> InputStatus:
        """Validate, update the hint and notify that completeness may have changed."""
        status = self.validate()
        self.tips = status.message()
        if self._on_complete_changed is not None:
            self._on_complete_changed()
        return status

    def is_complete(self) -> bool:
        """Whether the page may be accepted."""
        return self.validate() is InputStatus.VALID

    def settings(self) -> tuple[str, str]:
        """Return the trimmed project name and path."""
        return self.name.strip(), self.path.strip()

    def browse(self, chooser: Callable[[str], Optional[str]]) -> Optional[str]:
        """Ask ``chooser`` for a directory, starting from the current path.

        Returns the chosen directory, or None when the choice was cancelled.
        """
        current = self.path.strip()
        if not current or not os.path.isdir(current):
            current = os.getcwd()
        selected = chooser(current)
        if not selected:
            return None
        self.path = selected
        self.check_input()
        return selected