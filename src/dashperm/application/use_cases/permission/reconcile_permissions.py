"""Reconcile permissions use case - replace the ACL of a dashboard or folder."""

import logging
from collections.abc import Awaitable
from datetime import UTC, datetime
from typing import TypeVar

from dashperm.application.dto.permission_dto import (
    PermissionItemInput,
    ReconcileOptions,
    ResourceRef,
)
from dashperm.application.ports import AuthorizationOracle, LegacyAclStore
from dashperm.application.services.command_builder import PermissionCommandDispatcher
from dashperm.application.use_cases.permission.resolve_resource import resolve_resource
from dashperm.domain.entities import PermissionEntry, Principal, Resource
from dashperm.domain.exceptions import AuthorizationDenied, DashPermError, DependencyError
from dashperm.domain.services import reconcile, validate_permissions_update
from dashperm.domain.value_objects import PermissionLevel

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _dependency(message: str, call: Awaitable[T]) -> T:
    """Await an oracle/sink/store call, wrapping infrastructure failures."""
    try:
        return await call
    except DashPermError:
        raise
    except Exception as e:
        logger.exception("%s", message)
        raise DependencyError(message) from e


class ReconcilePermissionsUseCase:
    """Replace a resource's ACL with the submitted one.

    Permissions not included in the request are removed, except protected
    (hidden) entries supplied by the oracle, which are always kept.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        oracle: AuthorizationOracle,
        dispatcher: PermissionCommandDispatcher,
        legacy_store: LegacyAclStore,
        options: ReconcileOptions | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._oracle = oracle
        self._dispatcher = dispatcher
        self._legacy_store = legacy_store
        self._options = options or ReconcileOptions()

    async def execute(
        self,
        principal: Principal,
        ref: ResourceRef,
        items: list[PermissionItemInput],
        options: ReconcileOptions | None = None,
    ) -> bool:
        """Validate, authorize and apply the desired ACL. Returns True when applied."""
        options = options or self._options
        validate_permissions_update(items)

        resource = await resolve_resource(self._uow_factory, principal.org_id, ref)

        can_admin = await _dependency(
            "Error while checking admin permission",
            self._oracle.can_admin(principal, resource),
        )
        if not can_admin:
            logger.info(
                "User %s denied admin on %s %s", principal.login, _kind(resource), resource.uid
            )
            raise AuthorizationDenied("Permission denied")

        now = datetime.now(UTC)
        desired = [
            PermissionEntry(
                resource_id=resource.id,
                user_id=item.user_id,
                team_id=item.team_id,
                role=item.role,
                permission=item.permission,
                created=now,
                updated=now,
            )
            for item in items
        ]

        hidden = await _dependency(
            "Error while retrieving hidden permissions",
            self._oracle.get_hidden_acl(principal, resource),
        )
        desired.extend(hidden)

        safe = await _dependency(
            "Error while checking dashboard permissions",
            self._oracle.check_permission_before_update(
                principal, resource, PermissionLevel.ADMIN, desired
            ),
        )
        if not safe:
            logger.warning(
                "User %s attempted to remove own admin permission on %s",
                principal.login,
                resource.uid,
            )
            raise AuthorizationDenied("Cannot remove own admin permission for a folder")

        if options.access_control_enabled:
            await self._apply_commands(resource, desired)
        else:
            await self._apply_legacy(resource, desired)
        return True

    async def _apply_commands(self, resource: Resource, desired: list[PermissionEntry]) -> None:
        current = await _dependency(
            "Error while checking dashboard permissions",
            self._oracle.get_acl(resource),
        )
        commands = reconcile(current, desired)
        applied = await _dependency(
            "Failed to update permissions",
            self._dispatcher.apply(resource, commands),
        )
        logger.info(
            "Applied %d permission commands to %s %s (%d revokes)",
            applied,
            _kind(resource),
            resource.uid,
            sum(1 for c in commands if c.is_revoke),
        )

    async def _apply_legacy(self, resource: Resource, desired: list[PermissionEntry]) -> None:
        # AclInfoMissing / ResourceEmpty propagate as ConflictError
        await _dependency(
            "Failed to create permission",
            self._legacy_store.update_acl(resource.id, desired),
        )
        logger.info(
            "Replaced ACL of %s %s with %d entries", _kind(resource), resource.uid, len(desired)
        )


def _kind(resource: Resource) -> str:
    return "folder" if resource.is_folder else "dashboard"
