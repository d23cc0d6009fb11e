"""User repository port."""

from typing import Protocol

from dashperm.domain.entities import Principal


class UserRepository(Protocol):
    """Port for resolving authenticated logins to principals."""

    async def get_principal_by_login(self, login: str) -> Principal | None: ...
