"""Pytest fixtures for dashperm tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from dashperm.domain.entities import (
    PermissionEntry,
    PermissionEntryView,
    Principal,
    Resource,
)
from dashperm.domain.value_objects import BuiltinRole, PermissionLevel


# --- Fake repositories ---


class FakeResourceRepository:
    """In-memory dashboard/folder repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, Resource] = {}
        self.locked: list[str] = []

    async def get_by_id(self, org_id: int, resource_id: int) -> Resource | None:
        res = self._by_id.get(resource_id)
        if not res or res.org_id != org_id:
            return None
        return res

    async def get_by_uid(
        self, org_id: int, uid: str, *, for_update: bool = False
    ) -> Resource | None:
        for res in self._by_id.values():
            if res.org_id == org_id and res.uid == uid:
                if for_update:
                    self.locked.append(uid)
                return res
        return None

    def add(self, resource: Resource) -> Resource:
        """Helper to add resource for tests."""
        self._by_id[resource.id] = resource
        return resource


class FakeTeamRepository:
    """In-memory teams with membership."""

    def __init__(self) -> None:
        self._teams: dict[int, tuple[str, str | None]] = {}
        self._members: dict[int, set[int]] = {}

    async def list_ids_for_user(self, org_id: int, user_id: int) -> list[int]:
        return sorted(t for t, members in self._members.items() if user_id in members)

    def add_team(self, team_id: int, name: str, email: str | None = None, members=()) -> None:
        """Helper to add team for tests."""
        self._teams[team_id] = (name, email)
        self._members[team_id] = set(members)

    def get(self, team_id: int) -> tuple[str, str | None] | None:
        return self._teams.get(team_id)


class FakeUserRepository:
    """In-memory users."""

    def __init__(self) -> None:
        self._by_id: dict[int, Principal] = {}
        self._emails: dict[int, str | None] = {}

    async def get_principal_by_login(self, login: str) -> Principal | None:
        for p in self._by_id.values():
            if p.login == login:
                return p
        return None

    def add_user(self, principal: Principal, email: str | None = None) -> Principal:
        """Helper to add user for tests."""
        self._by_id[principal.user_id] = principal
        self._emails[principal.user_id] = email
        return principal

    def get(self, user_id: int) -> tuple[str, str | None] | None:
        p = self._by_id.get(user_id)
        if not p:
            return None
        return p.login, self._emails.get(user_id)


class FakePermissionRepository:
    """In-memory resource permissions keyed by resource and subject."""

    def __init__(
        self,
        resources: FakeResourceRepository,
        users: FakeUserRepository,
        teams: FakeTeamRepository,
    ) -> None:
        self._store: dict[tuple[int, int, int, str], PermissionEntry] = {}
        self._resources = resources
        self._users = users
        self._teams = teams

    @staticmethod
    def _key(resource_id: int, user_id: int, team_id: int, role: str | None) -> tuple:
        return (resource_id, user_id, team_id, role or "")

    async def list_for_resource(self, resource_id: int) -> list[PermissionEntryView]:
        res = self._resources._by_id.get(resource_id)
        items = []
        for entry in self._store.values():
            if entry.resource_id != resource_id:
                continue
            user = self._users.get(entry.user_id) if entry.user_id else None
            team = self._teams.get(entry.team_id) if entry.team_id else None
            items.append(
                PermissionEntryView(
                    resource_id=entry.resource_id,
                    user_id=entry.user_id,
                    team_id=entry.team_id,
                    role=entry.role,
                    permission=entry.permission,
                    created=entry.created,
                    updated=entry.updated,
                    user_login=user[0] if user else None,
                    user_email=user[1] if user else None,
                    team=team[0] if team else None,
                    team_email=team[1] if team else None,
                    uid=res.uid if res else None,
                    title=res.title if res else None,
                    slug=res.slug if res else None,
                    is_folder=res.is_folder if res else False,
                )
            )
        return items

    async def upsert(self, entry: PermissionEntry) -> None:
        key = self._key(entry.resource_id, entry.user_id, entry.team_id, entry.role)
        existing = self._store.get(key)
        if existing:
            entry = replace(existing, permission=entry.permission, updated=entry.updated)
        self._store[key] = entry

    async def delete_for_subject(
        self,
        resource_id: int,
        *,
        user_id: int = 0,
        team_id: int = 0,
        role: str | None = None,
    ) -> None:
        self._store.pop(self._key(resource_id, user_id, team_id, role), None)

    async def replace_for_resource(
        self, resource_id: int, entries: list[PermissionEntry]
    ) -> None:
        for key in [k for k in self._store if k[0] == resource_id]:
            del self._store[key]
        for entry in entries:
            await self.upsert(entry)

    def grant(
        self,
        resource_id: int,
        permission: PermissionLevel,
        *,
        user_id: int = 0,
        team_id: int = 0,
        role: str | None = None,
    ) -> None:
        """Helper to seed an entry for tests."""
        entry = PermissionEntry(
            resource_id=resource_id,
            permission=permission,
            user_id=user_id,
            team_id=team_id,
            role=role,
        )
        self._store[self._key(resource_id, user_id, team_id, role)] = entry

    def levels(self, resource_id: int) -> dict[str, PermissionLevel]:
        """Helper: subject key -> level for a resource."""
        return {
            e.subject_key(): e.permission
            for e in self._store.values()
            if e.resource_id == resource_id
        }


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.resources = FakeResourceRepository()
        self.teams = FakeTeamRepository()
        self.users = FakeUserRepository()
        self.permissions = FakePermissionRepository(self.resources, self.users, self.teams)
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager yielding the test's FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow
        await fake_uow.commit()

    return _factory


@pytest.fixture
def folder(fake_uow: FakeUnitOfWork) -> Resource:
    return fake_uow.resources.add(
        Resource(id=10, org_id=1, uid="folder-uid", title="Ops", slug="ops", is_folder=True)
    )


@pytest.fixture
def dashboard(fake_uow: FakeUnitOfWork, folder: Resource) -> Resource:
    return fake_uow.resources.add(
        Resource(
            id=20,
            org_id=1,
            uid="dash-uid",
            title="Latency",
            slug="latency",
            folder_id=folder.id,
        )
    )


@pytest.fixture
def admin_user(fake_uow: FakeUnitOfWork) -> Principal:
    return fake_uow.users.add_user(
        Principal(user_id=1, login="admin", org_id=1, org_role=BuiltinRole.ADMIN),
        email="admin@example.com",
    )


@pytest.fixture
def editor_user(fake_uow: FakeUnitOfWork) -> Principal:
    return fake_uow.users.add_user(
        Principal(user_id=2, login="editor", org_id=1, org_role=BuiltinRole.EDITOR),
        email="editor@example.com",
    )


@pytest.fixture
def mock_oracle():
    """AsyncMock for AuthorizationOracle - allows everything, no hidden entries, empty ACL."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.can_admin.return_value = True
    mock.get_hidden_acl.return_value = []
    mock.check_permission_before_update.return_value = True
    mock.get_acl.return_value = []
    mock.get_acl_without_duplicates.return_value = []
    return mock


@pytest.fixture
def mock_sinks():
    """Dashboard and folder PermissionSink mocks."""
    from unittest.mock import AsyncMock

    return AsyncMock(), AsyncMock()


@pytest.fixture
def mock_legacy_store():
    from unittest.mock import AsyncMock

    return AsyncMock()
