"""Reconciliation command - one grant or revoke produced by the ACL diff."""

from dataclasses import dataclass

from dashperm.domain.value_objects import PermissionLevel


@dataclass(frozen=True)
class ReconciliationCommand:
    """Set subject's permission on the resource; permission None means revoke."""

    permission: PermissionLevel | None
    user_id: int = 0
    team_id: int = 0
    role: str | None = None

    @property
    def is_revoke(self) -> bool:
        return self.permission is None
