"""Resource repository port."""

from typing import Protocol

from dashperm.domain.entities import Resource


class ResourceRepository(Protocol):
    """Port for dashboard and folder lookup."""

    async def get_by_id(self, org_id: int, resource_id: int) -> Resource | None: ...

    async def get_by_uid(
        self, org_id: int, uid: str, *, for_update: bool = False
    ) -> Resource | None: ...
