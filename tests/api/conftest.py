"""Fixtures for API tests."""

import pytest

from dashperm.application.dto.permission_dto import ReconcileOptions
from dashperm.application.services.command_builder import PermissionCommandDispatcher
from dashperm.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from dashperm.application.use_cases.permission.reconcile_permissions import (
    ReconcilePermissionsUseCase,
)
from dashperm.infrastructure.avatar.gravatar_provider import GravatarProvider
from dashperm.infrastructure.permission.guardian import AclGuardian
from dashperm.infrastructure.permission.legacy_acl_store import AclListStore
from dashperm.infrastructure.permission.permission_sink import ResourcePermissionSink
from dashperm.interfaces.api.app import create_app
from dashperm.interfaces.api.resources.health import HealthResource
from dashperm.interfaces.api.resources.permissions import (
    DashboardPermissionsResource,
    FolderPermissionsResource,
)


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing."""

    def __init__(self, holder: dict) -> None:
        self._holder = holder

    async def process_request(self, req, resp):
        req.context.user = self._holder.get("user")


@pytest.fixture
def current_user(admin_user) -> dict:
    """Mutable holder for the signed-in principal; admin by default."""
    return {"user": admin_user}


@pytest.fixture
def reconcile_options() -> ReconcileOptions:
    return ReconcileOptions()


@pytest.fixture
def app(uow_factory, dashboard, current_user, reconcile_options):
    """Falcon ASGI app wired to in-memory repositories."""
    hidden_users = frozenset({"robot"})
    guardian = AclGuardian(uow_factory, hidden_users=hidden_users)
    dispatcher = PermissionCommandDispatcher(
        dashboard_sink=ResourcePermissionSink(uow_factory, is_folder=False),
        folder_sink=ResourcePermissionSink(uow_factory, is_folder=True),
    )
    list_permissions = ListPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        oracle=guardian,
        avatar_provider=GravatarProvider(),
        hidden_users=hidden_users,
    )
    reconcile_permissions = ReconcilePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        oracle=guardian,
        dispatcher=dispatcher,
        legacy_store=AclListStore(uow_factory),
        options=reconcile_options,
    )
    return create_app(
        dashboard_permissions=DashboardPermissionsResource(list_permissions, reconcile_permissions),
        folder_permissions=FolderPermissionsResource(list_permissions, reconcile_permissions),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware(current_user)],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
