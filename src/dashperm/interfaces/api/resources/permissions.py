"""Dashboard and folder permissions API resources."""

from typing import Any

import falcon.asgi

from dashperm.application.dto.permission_dto import PermissionItemInput, ResourceRef
from dashperm.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from dashperm.application.use_cases.permission.reconcile_permissions import (
    ReconcilePermissionsUseCase,
)
from dashperm.domain.entities import PermissionEntryView
from dashperm.domain.exceptions import (
    AclInfoMissing,
    AuthorizationDenied,
    ConflictError,
    DashPermError,
    NotFound,
    ResourceEmpty,
    ValidationError,
)
from dashperm.domain.value_objects import BuiltinRole, PermissionLevel


def _parse_subject_id(value: Any) -> int:
    """userId/teamId: an integer or digit string. Booleans and fractions are rejected."""
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise ValidationError("bad request data")


def _parse_items(body: Any) -> list[PermissionItemInput]:
    """Parse {"items": [{"userId", "teamId", "role", "permission"}]}."""
    if not isinstance(body, dict) or not isinstance(body.get("items"), list):
        raise ValidationError("bad request data")
    items = []
    for raw in body["items"]:
        if not isinstance(raw, dict):
            raise ValidationError("bad request data")
        try:
            role = raw.get("role")
            items.append(
                PermissionItemInput(
                    user_id=_parse_subject_id(raw.get("userId")),
                    team_id=_parse_subject_id(raw.get("teamId")),
                    role=BuiltinRole(role).value if role is not None else None,
                    permission=PermissionLevel.parse(raw["permission"]),
                )
            )
        except KeyError:
            raise ValidationError("Missing required field: permission") from None
        except (TypeError, ValueError) as e:
            raise ValidationError(f"bad request data: {e}") from None
    return items


def _serialize(perm: PermissionEntryView, resource_id_key: str) -> dict:
    return {
        resource_id_key: perm.resource_id,
        "userId": perm.user_id,
        "userLogin": perm.user_login or "",
        "userEmail": perm.user_email or "",
        "userAvatarUrl": perm.user_avatar_url or "",
        "teamId": perm.team_id,
        "team": perm.team or "",
        "teamEmail": perm.team_email or "",
        "teamAvatarUrl": perm.team_avatar_url or "",
        "role": perm.role,
        "permission": int(perm.permission),
        "permissionName": perm.permission.label,
        "uid": perm.uid or "",
        "title": perm.title or "",
        "slug": perm.slug or "",
        "isFolder": perm.is_folder,
        "url": perm.url or "",
        "inherited": perm.inherited,
        "created": perm.created.isoformat() if perm.created else None,
        "updated": perm.updated.isoformat() if perm.updated else None,
    }


class _PermissionsResource:
    """Shared GET/POST handling for dashboard and folder permissions."""

    is_folder = False
    updated_message = "Dashboard permissions updated"

    def __init__(
        self,
        list_permissions: ListPermissionsUseCase,
        reconcile_permissions: ReconcilePermissionsUseCase,
    ) -> None:
        self._list = list_permissions
        self._reconcile = reconcile_permissions

    async def _get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, ref: ResourceRef) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            acl = await self._list.execute(user, ref)
        except DashPermError as e:
            resp.status = _status_for(e)
            resp.media = {"error": str(e)}
            return

        key = "folderId" if self.is_folder else "dashboardId"
        resp.media = [_serialize(p, key) for p in acl]
        resp.status = falcon.HTTP_200

    async def _post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, ref: ResourceRef) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            items = _parse_items(body)
            await self._reconcile.execute(user, ref, items)
        except falcon.HTTPBadRequest:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "bad request data"}
            return
        except DashPermError as e:
            resp.status = _status_for(e)
            resp.media = {"error": str(e)}
            return

        resp.media = {"message": self.updated_message}
        resp.status = falcon.HTTP_200


class DashboardPermissionsResource(_PermissionsResource):
    """GET/POST /v1/dashboards/uid/{uid}/permissions and the deprecated id route."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, uid: str) -> None:
        """List permissions of dashboard."""
        await self._get(req, resp, ResourceRef(uid=uid))

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, uid: str) -> None:
        """Replace permissions of dashboard. Entries not in the request are removed."""
        await self._post(req, resp, ResourceRef(uid=uid))

    async def on_get_by_id(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Deprecated: list permissions by numeric dashboard id."""
        ref = _ref_from_id(resp, dashboard_id)
        if ref:
            await self._get(req, resp, ref)

    async def on_post_by_id(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Deprecated: replace permissions by numeric dashboard id."""
        ref = _ref_from_id(resp, dashboard_id)
        if ref:
            await self._post(req, resp, ref)


class FolderPermissionsResource(_PermissionsResource):
    """GET/POST /v1/folders/{uid}/permissions."""

    is_folder = True
    updated_message = "Folder permissions updated"

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, uid: str) -> None:
        """List permissions of folder."""
        await self._get(req, resp, ResourceRef(uid=uid, is_folder=True))

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, uid: str) -> None:
        """Replace permissions of folder. Entries not in the request are removed."""
        await self._post(req, resp, ResourceRef(uid=uid, is_folder=True))


def _ref_from_id(resp: falcon.asgi.Response, dashboard_id: str) -> ResourceRef | None:
    try:
        return ResourceRef(id=int(dashboard_id))
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "dashboardId is invalid"}
        return None


def _status_for(e: DashPermError) -> str:
    """HTTP status of a domain error."""
    if isinstance(e, (AclInfoMissing, ResourceEmpty)):
        return falcon.HTTP_409
    if isinstance(e, (ValidationError, ConflictError)):
        return falcon.HTTP_400
    if isinstance(e, AuthorizationDenied):
        return falcon.HTTP_403
    if isinstance(e, NotFound):
        return falcon.HTTP_404
    return falcon.HTTP_500
