"""Permission sink port - applies resource permission commands."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SetResourcePermissionCommand:
    """Sink call shape: exactly one of user/team/builtin role; empty permission revokes."""

    user_id: int = 0
    team_id: int = 0
    builtin_role: str = ""
    permission: str = ""


class PermissionSink(Protocol):
    """Port for durably applying a batch of commands to one resource kind."""

    async def set_permissions(
        self, org_id: int, uid: str, commands: list[SetResourcePermissionCommand]
    ) -> None: ...
