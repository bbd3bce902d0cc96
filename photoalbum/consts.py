"""Enumerations shared across the photo album application."""

from __future__ import annotations

from enum import Enum, IntEnum


class TreeItemType(IntEnum):
    """Kind of node in the project tree."""

    PRO = 1
    DIR = 2
    PIC = 3


class InputStatus(Enum):
    """Outcome of validating the project name and location."""

    VALID = "valid"
    EMPTY_FIELD = "empty_field"
    PATH_NOT_EXIST = "path_not_exist"
    PROJECT_EXISTS = "project_exists"

    def message(self) -> str:
        """Return the hint shown to the user for this status."""
        return _MESSAGES[self]


_MESSAGES = {
    InputStatus.VALID: "",
    InputStatus.EMPTY_FIELD: "项目名称和路径不能为空",
    InputStatus.PATH_NOT_EXIST: "项目路径不存在",
    InputStatus.PROJECT_EXISTS: "该项目路径已存在",
}