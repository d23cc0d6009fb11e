"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from dashperm.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from dashperm.application.ports.repositories.resource_repository import (
    ResourceRepository,
)
from dashperm.application.ports.repositories.team_repository import TeamRepository
from dashperm.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def resources(self) -> ResourceRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def teams(self) -> TeamRepository: ...

    @property
    def users(self) -> UserRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
