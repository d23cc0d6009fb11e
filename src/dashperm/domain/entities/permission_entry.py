"""Permission entry entity - one grant on a dashboard or folder."""

from dataclasses import dataclass
from datetime import datetime

from dashperm.domain.value_objects import PermissionLevel


@dataclass
class PermissionEntry:
    """Grant of a permission level to exactly one subject: user, team or built-in role.

    Zero user/team id and a None role mean "not set".
    """

    resource_id: int
    permission: PermissionLevel
    user_id: int = 0
    team_id: int = 0
    role: str | None = None
    created: datetime | None = None
    updated: datetime | None = None

    def subject_key(self) -> str | None:
        """Normalized subject key: user:<id>, team:<id> or role:<name>."""
        if self.user_id > 0:
            return f"user:{self.user_id}"
        if self.team_id > 0:
            return f"team:{self.team_id}"
        if self.role is not None:
            return f"role:{self.role}"
        return None

    def has_subject(self) -> bool:
        return self.subject_key() is not None

    def is_duplicate_of(self, other: "PermissionEntry") -> bool:
        """Same subject as other, regardless of permission level."""
        return (
            self._has_same_role_as(other)
            or self._has_same_user_as(other)
            or self._has_same_team_as(other)
        )

    def _has_same_role_as(self, other: "PermissionEntry") -> bool:
        if self.role is None or other.role is None:
            return False
        return (
            self.user_id <= 0
            and self.team_id <= 0
            and self.user_id == other.user_id
            and self.team_id == other.team_id
            and self.role == other.role
        )

    def _has_same_user_as(self, other: "PermissionEntry") -> bool:
        if self.user_id <= 0 or other.user_id <= 0:
            return False
        return self.user_id == other.user_id and self.role is None and other.role is None

    def _has_same_team_as(self, other: "PermissionEntry") -> bool:
        if self.team_id <= 0 or other.team_id <= 0:
            return False
        return self.team_id == other.team_id and self.role is None and other.role is None


@dataclass
class PermissionEntryView(PermissionEntry):
    """Entry enriched with resolved display metadata (ACL info)."""

    user_login: str | None = None
    user_email: str | None = None
    user_avatar_url: str | None = None
    team: str | None = None
    team_email: str | None = None
    team_avatar_url: str | None = None
    uid: str | None = None
    title: str | None = None
    slug: str | None = None
    is_folder: bool = False
    url: str | None = None
    inherited: bool = False
