"""PostgreSQL team repository implementation."""

from psycopg import AsyncConnection


class PostgresTeamRepository:
    """Team membership lookups."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_ids_for_user(self, org_id: int, user_id: int) -> list[int]:
        """Ids of the org's teams the user belongs to."""
        cur = await self._conn.execute(
            "SELECT t.id FROM team t JOIN team_member m ON m.team_id = t.id "
            "WHERE t.org_id = %s AND m.user_id = %s",
            (org_id, user_id),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]
