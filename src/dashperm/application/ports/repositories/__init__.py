"""Repository ports."""

from dashperm.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from dashperm.application.ports.repositories.resource_repository import (
    ResourceRepository,
)
from dashperm.application.ports.repositories.team_repository import TeamRepository
from dashperm.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "PermissionRepository",
    "ResourceRepository",
    "TeamRepository",
    "UserRepository",
]
