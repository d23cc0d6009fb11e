"""Permission DTOs."""

from dataclasses import dataclass

from dashperm.domain.value_objects import PermissionLevel


@dataclass
class PermissionItemInput:
    """One submitted permission item."""

    permission: PermissionLevel
    user_id: int = 0
    team_id: int = 0
    role: str | None = None


@dataclass(frozen=True)
class ResourceRef:
    """Dashboard or folder reference - uid preferred, numeric id for legacy routes."""

    uid: str | None = None
    id: int | None = None
    is_folder: bool = False


@dataclass(frozen=True)
class ReconcileOptions:
    """Per-call switches for permission reconciliation."""

    access_control_enabled: bool = True
