"""Authorization oracle port - decides who may administer a resource."""

from typing import Protocol

from dashperm.domain.entities import (
    PermissionEntry,
    PermissionEntryView,
    Principal,
    Resource,
)
from dashperm.domain.value_objects import PermissionLevel


class AuthorizationOracle(Protocol):
    """Port for authorization decisions on dashboards and folders.

    check_permission_before_update raises AlreadyGranted or OverrideForbidden
    when the desired set is malformed against existing permissions, and
    returns False when applying it would strip the principal's own rights.
    """

    async def can_admin(self, principal: Principal, resource: Resource) -> bool: ...

    async def get_acl(self, resource: Resource) -> list[PermissionEntryView]: ...

    async def get_acl_without_duplicates(
        self, resource: Resource
    ) -> list[PermissionEntryView]: ...

    async def get_hidden_acl(
        self, principal: Principal, resource: Resource
    ) -> list[PermissionEntry]: ...

    async def check_permission_before_update(
        self,
        principal: Principal,
        resource: Resource,
        permission: PermissionLevel,
        desired: list[PermissionEntry],
    ) -> bool: ...
