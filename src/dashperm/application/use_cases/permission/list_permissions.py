"""List permissions use case."""

import logging

from dashperm.application.dto.permission_dto import ResourceRef
from dashperm.application.ports import AuthorizationOracle, AvatarProvider
from dashperm.application.use_cases.permission.resolve_resource import resolve_resource
from dashperm.domain.entities import PermissionEntryView, Principal, resource_url
from dashperm.domain.exceptions import AuthorizationDenied, DashPermError, DependencyError

logger = logging.getLogger(__name__)


def is_hidden_user(login: str | None, principal: Principal, hidden_users: frozenset[str]) -> bool:
    """Hidden logins are visible only to themselves and server admins."""
    if not login or principal.is_server_admin or login == principal.login:
        return False
    return login in hidden_users


class ListPermissionsUseCase:
    """List the effective ACL of a dashboard or folder for an administrator."""

    def __init__(
        self,
        unit_of_work_factory: type,
        oracle: AuthorizationOracle,
        avatar_provider: AvatarProvider,
        hidden_users: frozenset[str] = frozenset(),
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._oracle = oracle
        self._avatars = avatar_provider
        self._hidden_users = hidden_users

    async def execute(self, principal: Principal, ref: ResourceRef) -> list[PermissionEntryView]:
        """Return ACL without duplicates, hidden users filtered, avatars and URLs set."""
        resource = await resolve_resource(self._uow_factory, principal.org_id, ref)

        try:
            can_admin = await self._oracle.can_admin(principal, resource)
            acl = await self._oracle.get_acl_without_duplicates(resource) if can_admin else []
        except DashPermError:
            raise
        except Exception as e:
            logger.exception("Failed to get permissions of %s", resource.uid)
            raise DependencyError("Failed to get dashboard permissions") from e
        if not can_admin:
            raise AuthorizationDenied("Permission denied")

        items = []
        for perm in acl:
            if perm.user_id > 0 and is_hidden_user(perm.user_login, principal, self._hidden_users):
                continue
            perm.user_avatar_url = self._avatars.user_avatar_url(perm.user_email)
            if perm.team_id > 0:
                perm.team_avatar_url = self._avatars.team_avatar_url(perm.team_email, perm.team)
            if perm.slug:
                perm.url = resource_url(perm.is_folder, perm.uid or "", perm.slug)
            items.append(perm)
        return items
