"""Permission levels on dashboards and folders."""

from enum import IntEnum


class PermissionLevel(IntEnum):
    """Ordered permission level - higher value includes lower ones."""

    VIEW = 1
    EDIT = 2
    ADMIN = 4

    @property
    def label(self) -> str:
        """Display and wire form: View, Edit, Admin."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: "int | str | PermissionLevel") -> "PermissionLevel":
        """Parse from integer value or name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid permission level: {value!r}")
        if isinstance(value, int):
            return cls(value)
        text = str(value).strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid permission level: {value!r}") from None
