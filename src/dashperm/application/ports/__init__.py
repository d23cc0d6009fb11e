"""Application ports - interfaces for external adapters."""

from dashperm.application.ports.authorization_oracle import AuthorizationOracle
from dashperm.application.ports.avatar_provider import AvatarProvider
from dashperm.application.ports.legacy_acl_store import LegacyAclStore
from dashperm.application.ports.permission_sink import (
    PermissionSink,
    SetResourcePermissionCommand,
)
from dashperm.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuthorizationOracle",
    "AvatarProvider",
    "LegacyAclStore",
    "PermissionSink",
    "SetResourcePermissionCommand",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
