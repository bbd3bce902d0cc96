"""Project creation wizard."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

from .projectsettings import ProjectSettingsForm


class DialogResult(IntEnum):
    """How a dialog was closed."""

    REJECTED = 0
    ACCEPTED = 1


class Wizard:
    """Collects project settings and announces them when accepted."""

    title = "创建项目"

    def __init__(self, form: Optional[ProjectSettingsForm] = None) -> None:
        self.form = form if form is not None else ProjectSettingsForm()
        self.result: Optional[int] = None
        self._receivers: list[Callable[[str, str], object]] = []

    def connect(self, callback: Callable[[str, str], object]) -> None:
        """Register a receiver of (name, path) on acceptance."""
        self._receivers.append(callback)

    def disconnect(self, callback: Callable[[str, str], object]) -> bool:
        """Remove a receiver; return whether it was connected."""
        try:
            self._receivers.remove(callback)
        except ValueError:
            return False
        return True

    def done(self, result: int) -> None:
        """Close the wizard, sending the settings unless it was rejected."""
        if result != DialogResult.REJECTED:
            name, path = self.form.settings()
            for receiver in list(self._receivers):
                receiver(name, path)
        self.result = result