"""Authorization oracle implementation - checks against stored resource permissions."""

from dashperm.domain.entities import (
    PermissionEntry,
    PermissionEntryView,
    Principal,
    Resource,
)
from dashperm.domain.exceptions import AlreadyGranted, OverrideForbidden
from dashperm.domain.value_objects import BuiltinRole, PermissionLevel


class AclGuardian:
    """Decides admin rights from the resource ACL and its parent folder's ACL.

    Organization admins may administer everything. Other users need a user,
    built-in role or team entry with the required level.
    """

    def __init__(self, unit_of_work_factory: type, hidden_users: frozenset[str] = frozenset()) -> None:
        self._uow_factory = unit_of_work_factory
        self._hidden_users = hidden_users

    async def get_acl(self, resource: Resource) -> list[PermissionEntryView]:
        """Entries inherited from the parent folder first, then the resource's own."""
        async with self._uow_factory() as uow:
            own = await uow.permissions.list_for_resource(resource.id)
            inherited = []
            if not resource.is_folder and resource.folder_id:
                inherited = await uow.permissions.list_for_resource(resource.folder_id)
        for item in inherited:
            item.inherited = True
        return inherited + own

    async def get_acl_without_duplicates(self, resource: Resource) -> list[PermissionEntryView]:
        """Drop own entries that do not raise an inherited entry of the same subject."""
        acl = await self.get_acl(resource)
        inherited = [a for a in acl if a.inherited]
        own = [
            a
            for a in acl
            if not a.inherited
            and not any(a.is_duplicate_of(i) and a.permission <= i.permission for i in inherited)
        ]
        return inherited + own

    async def can_admin(self, principal: Principal, resource: Resource) -> bool:
        return await self.has_permission(principal, resource, PermissionLevel.ADMIN)

    async def has_permission(
        self, principal: Principal, resource: Resource, permission: PermissionLevel
    ) -> bool:
        if principal.org_role == BuiltinRole.ADMIN:
            return True
        acl = await self.get_acl(resource)
        return await self._check_acl(principal, permission, acl)

    async def get_hidden_acl(
        self, principal: Principal, resource: Resource
    ) -> list[PermissionEntry]:
        """Own entries of hidden users other than the principal.

        Server admins see hidden users in listings, so nothing is protected for them.
        """
        if principal.is_server_admin:
            return []
        acl = await self.get_acl(resource)
        return [
            PermissionEntry(
                resource_id=resource.id,
                user_id=item.user_id,
                team_id=item.team_id,
                role=item.role,
                permission=item.permission,
                created=item.created,
                updated=item.updated,
            )
            for item in acl
            if not item.inherited
            and item.user_login
            and item.user_login != principal.login
            and item.user_login in self._hidden_users
        ]

    async def check_permission_before_update(
        self,
        principal: Principal,
        resource: Resource,
        permission: PermissionLevel,
        desired: list[PermissionEntry],
    ) -> bool:
        """Reject duplicates and lowered overrides; False if principal would lose access."""
        everyone_with_admin_role = PermissionEntry(
            resource_id=resource.id,
            role=BuiltinRole.ADMIN.value,
            permission=PermissionLevel.ADMIN,
        )

        seen: list[PermissionEntry] = []
        for item in desired:
            if item.is_duplicate_of(everyone_with_admin_role):
                raise AlreadyGranted()
            if any(other.is_duplicate_of(item) for other in seen):
                raise AlreadyGranted()
            seen.append(item)

        existing = await self.get_acl(resource)
        for item in seen:
            for old in existing:
                if old.inherited and item.is_duplicate_of(old) and item.permission <= old.permission:
                    raise OverrideForbidden()

        if principal.org_role == BuiltinRole.ADMIN:
            return True
        return await self._check_acl(principal, permission, seen)

    async def _check_acl(
        self,
        principal: Principal,
        permission: PermissionLevel,
        acl: list[PermissionEntry],
    ) -> bool:
        team_entries = []
        for item in acl:
            if item.user_id > 0 and item.user_id == principal.user_id and item.permission >= permission:
                return True
            if item.role is not None and item.role == principal.org_role and item.permission >= permission:
                return True
            if item.team_id > 0:
                team_entries.append(item)

        if not team_entries:
            return False

        async with self._uow_factory() as uow:
            team_ids = set(await uow.teams.list_ids_for_user(principal.org_id, principal.user_id))
        return any(
            item.team_id in team_ids and item.permission >= permission for item in team_entries
        )
