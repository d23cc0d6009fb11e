"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from dashperm.domain.entities import Principal
from dashperm.domain.value_objects import BuiltinRole


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_principal_by_login(self, login: str) -> Principal | None:
        """Get user with org membership by login."""
        cur = await self._conn.execute(
            "SELECT id, login, org_id, org_role, is_server_admin FROM app_user WHERE login = %s",
            (login,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Principal(
            user_id=r[0],
            login=r[1],
            org_id=r[2],
            org_role=BuiltinRole(r[3]),
            is_server_admin=r[4],
        )
