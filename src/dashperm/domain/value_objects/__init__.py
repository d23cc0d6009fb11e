"""Domain value objects."""

from dashperm.domain.value_objects.builtin_role import BuiltinRole
from dashperm.domain.value_objects.permission_level import PermissionLevel

__all__ = [
    "BuiltinRole",
    "PermissionLevel",
]
