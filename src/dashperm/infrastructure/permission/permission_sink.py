"""Permission sink implementation - applies command batches in one transaction."""

from datetime import UTC, datetime

from dashperm.application.ports import SetResourcePermissionCommand
from dashperm.domain.entities import PermissionEntry
from dashperm.domain.exceptions import NotFound, ValidationError
from dashperm.domain.value_objects import PermissionLevel


class ResourcePermissionSink:
    """Sets permissions on dashboards or folders (one sink per resource kind).

    The resource row is locked for the whole batch so concurrent updates of
    the same resource are serialized.
    """

    def __init__(self, unit_of_work_factory: type, is_folder: bool) -> None:
        self._uow_factory = unit_of_work_factory
        self._is_folder = is_folder

    async def set_permissions(
        self, org_id: int, uid: str, commands: list[SetResourcePermissionCommand]
    ) -> None:
        """Grant or revoke (empty permission) each command's subject on resource uid."""
        for cmd in commands:
            _validate(cmd)

        async with self._uow_factory() as uow:
            resource = await uow.resources.get_by_uid(org_id, uid, for_update=True)
            if resource is None or resource.is_folder != self._is_folder:
                raise NotFound("Folder" if self._is_folder else "Dashboard", uid)

            now = datetime.now(UTC)
            for cmd in commands:
                role = cmd.builtin_role or None
                if not cmd.permission:
                    await uow.permissions.delete_for_subject(
                        resource.id, user_id=cmd.user_id, team_id=cmd.team_id, role=role
                    )
                    continue
                await uow.permissions.upsert(
                    PermissionEntry(
                        resource_id=resource.id,
                        user_id=cmd.user_id,
                        team_id=cmd.team_id,
                        role=role,
                        permission=PermissionLevel.parse(cmd.permission),
                        created=now,
                        updated=now,
                    )
                )


def _validate(cmd: SetResourcePermissionCommand) -> None:
    subjects = sum((cmd.user_id > 0, cmd.team_id > 0, bool(cmd.builtin_role)))
    if subjects != 1:
        raise ValidationError("Exactly one of user, team or builtin role is required")
    if cmd.permission:
        try:
            PermissionLevel.parse(cmd.permission)
        except ValueError as e:
            raise ValidationError(str(e)) from e
