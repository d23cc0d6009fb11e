"""Auth middleware - resolves the signed-in user from a Keycloak JWT."""

import logging

import falcon.asgi

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.user to a Principal or None."""

    def __init__(self, keycloak_provider, unit_of_work_factory) -> None:
        self._keycloak = keycloak_provider
        self._uow_factory = unit_of_work_factory

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return

        oidc_user = self._keycloak.decode_token(auth[7:])
        if not oidc_user:
            return

        async with self._uow_factory() as uow:
            principal = await uow.users.get_principal_by_login(oidc_user.login)
        if principal is None:
            logger.info("Authenticated login %s has no local user", oidc_user.login)
        req.context.user = principal
