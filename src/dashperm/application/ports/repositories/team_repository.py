"""Team repository port."""

from typing import Protocol


class TeamRepository(Protocol):
    """Port for team membership."""

    async def list_ids_for_user(self, org_id: int, user_id: int) -> list[int]: ...
