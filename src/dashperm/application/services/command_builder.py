"""Command builder - reconciliation output to permission sink calls."""

from dashperm.application.ports import PermissionSink, SetResourcePermissionCommand
from dashperm.domain.entities import ReconciliationCommand, Resource


def build_commands(
    commands: list[ReconciliationCommand],
) -> list[SetResourcePermissionCommand]:
    """Split subjects into user/team/builtin role fields; revokes get an empty permission."""
    return [
        SetResourcePermissionCommand(
            user_id=cmd.user_id,
            team_id=cmd.team_id,
            builtin_role=str(cmd.role) if cmd.role is not None else "",
            permission=cmd.permission.label if cmd.permission is not None else "",
        )
        for cmd in commands
    ]


class PermissionCommandDispatcher:
    """Routes command batches to the folder or dashboard permission sink."""

    def __init__(self, dashboard_sink: PermissionSink, folder_sink: PermissionSink) -> None:
        self._dashboard_sink = dashboard_sink
        self._folder_sink = folder_sink

    async def apply(self, resource: Resource, commands: list[ReconciliationCommand]) -> int:
        """Apply commands for resource. Returns number of commands submitted."""
        sink = self._folder_sink if resource.is_folder else self._dashboard_sink
        batch = build_commands(commands)
        await sink.set_permissions(resource.org_id, resource.uid, batch)
        return len(batch)
