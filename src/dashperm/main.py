"""Application entry point and composition root."""

import logging

from dashperm import __version__
from dashperm.application.dto.permission_dto import ReconcileOptions
from dashperm.application.services.command_builder import PermissionCommandDispatcher
from dashperm.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from dashperm.application.use_cases.permission.reconcile_permissions import (
    ReconcilePermissionsUseCase,
)
from dashperm.config import Settings, get_settings
from dashperm.infrastructure.auth.keycloak_provider import KeycloakProvider
from dashperm.infrastructure.avatar.gravatar_provider import GravatarProvider
from dashperm.infrastructure.permission.guardian import AclGuardian
from dashperm.infrastructure.permission.legacy_acl_store import AclListStore
from dashperm.infrastructure.permission.permission_sink import ResourcePermissionSink
from dashperm.infrastructure.persistence.postgres.connection import create_pool
from dashperm.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from dashperm.interfaces.api.app import create_app
from dashperm.interfaces.api.middleware.auth import AuthMiddleware
from dashperm.interfaces.api.middleware.cors import CORSMiddleware
from dashperm.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from dashperm.interfaces.api.resources.health import HealthResource
from dashperm.interfaces.api.resources.permissions import (
    DashboardPermissionsResource,
    FolderPermissionsResource,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logger from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"dashperm v{__version__}")


def create_dashperm_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(settings.database_url, max_size=settings.database_pool_max_size)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set, all requests are unauthenticated")

    hidden_users = settings.hidden_user_set
    guardian = AclGuardian(uow_factory, hidden_users=hidden_users)
    dispatcher = PermissionCommandDispatcher(
        dashboard_sink=ResourcePermissionSink(uow_factory, is_folder=False),
        folder_sink=ResourcePermissionSink(uow_factory, is_folder=True),
    )

    list_permissions = ListPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        oracle=guardian,
        avatar_provider=GravatarProvider(settings.gravatar_url),
        hidden_users=hidden_users,
    )
    reconcile_permissions = ReconcilePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        oracle=guardian,
        dispatcher=dispatcher,
        legacy_store=AclListStore(uow_factory),
        options=ReconcileOptions(access_control_enabled=settings.access_control_enabled),
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = create_app(
        dashboard_permissions=DashboardPermissionsResource(list_permissions, reconcile_permissions),
        folder_permissions=FolderPermissionsResource(list_permissions, reconcile_permissions),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, uow_factory),
        ],
    )
    logger.info(
        "dashperm v%s ready (access control %s)",
        __version__,
        "enabled" if settings.access_control_enabled else "disabled",
    )
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_dashperm_app(), host="0.0.0.0", port=8000)
