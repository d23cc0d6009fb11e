"""Falcon ASGI application."""

import logging

import falcon.asgi
from falcon.asgi import App

from dashperm.interfaces.api.resources.health import HealthResource
from dashperm.interfaces.api.resources.permissions import (
    DashboardPermissionsResource,
    FolderPermissionsResource,
)

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    dashboard_permissions: DashboardPermissionsResource,
    folder_permissions: FolderPermissionsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/dashboards/uid/{uid}/permissions", dashboard_permissions)
    app.add_route(
        "/v1/dashboards/id/{dashboard_id}/permissions",
        dashboard_permissions,
        suffix="by_id",
    )
    app.add_route("/v1/folders/{uid}/permissions", folder_permissions)
    return app
