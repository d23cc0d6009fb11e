"""Permission repository port."""

from typing import Protocol

from dashperm.domain.entities import PermissionEntry, PermissionEntryView


class PermissionRepository(Protocol):
    """Port for persisted permission entries of dashboards and folders."""

    async def list_for_resource(self, resource_id: int) -> list[PermissionEntryView]: ...

    async def upsert(self, entry: PermissionEntry) -> None: ...

    async def delete_for_subject(
        self,
        resource_id: int,
        *,
        user_id: int = 0,
        team_id: int = 0,
        role: str | None = None,
    ) -> None: ...

    async def replace_for_resource(
        self, resource_id: int, entries: list[PermissionEntry]
    ) -> None: ...
