"""Legacy ACL store port - list-based permission replacement."""

from typing import Protocol

from dashperm.domain.entities import PermissionEntry


class LegacyAclStore(Protocol):
    """Port replacing a resource's whole ACL in one call."""

    async def update_acl(self, resource_id: int, entries: list[PermissionEntry]) -> None: ...
