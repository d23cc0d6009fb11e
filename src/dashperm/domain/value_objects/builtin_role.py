"""Built-in organization roles."""

from enum import StrEnum


class BuiltinRole(StrEnum):
    """Organization roles that can hold permissions as a subject."""

    VIEWER = "Viewer"
    EDITOR = "Editor"
    ADMIN = "Admin"
