"""PostgreSQL resource permission repository implementation."""

from psycopg import AsyncConnection

from dashperm.domain.entities import PermissionEntry, PermissionEntryView
from dashperm.domain.value_objects import PermissionLevel

# role is stored as '' when unset so (resource_id, user_id, team_id, role) stays unique
_LIST_SQL = (
    "SELECT p.resource_id, p.user_id, p.team_id, p.role, p.permission, p.created, p.updated, "
    "u.login, u.email, t.name, t.email, r.uid, r.title, r.slug, r.is_folder "
    "FROM resource_permission p "
    "JOIN resource r ON r.id = p.resource_id "
    "LEFT JOIN app_user u ON u.id = p.user_id "
    "LEFT JOIN team t ON t.id = p.team_id "
    "WHERE p.resource_id = %s ORDER BY p.id"
)


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_resource(self, resource_id: int) -> list[PermissionEntryView]:
        """List own entries of resource with user, team and resource details."""
        cur = await self._conn.execute(_LIST_SQL, (resource_id,))
        rows = await cur.fetchall()
        return [
            PermissionEntryView(
                resource_id=r[0],
                user_id=r[1],
                team_id=r[2],
                role=r[3] or None,
                permission=PermissionLevel(r[4]),
                created=r[5],
                updated=r[6],
                user_login=r[7],
                user_email=r[8],
                team=r[9],
                team_email=r[10],
                uid=r[11],
                title=r[12],
                slug=r[13],
                is_folder=r[14],
            )
            for r in rows
        ]

    async def upsert(self, entry: PermissionEntry) -> None:
        """Insert entry or update permission level of existing subject."""
        await self._conn.execute(
            "INSERT INTO resource_permission "
            "(resource_id, user_id, team_id, role, permission, created, updated) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (resource_id, user_id, team_id, role) "
            "DO UPDATE SET permission = EXCLUDED.permission, updated = EXCLUDED.updated",
            (
                entry.resource_id,
                entry.user_id,
                entry.team_id,
                entry.role or "",
                int(entry.permission),
                entry.created,
                entry.updated,
            ),
        )

    async def delete_for_subject(
        self,
        resource_id: int,
        *,
        user_id: int = 0,
        team_id: int = 0,
        role: str | None = None,
    ) -> None:
        """Delete subject's entry on resource."""
        await self._conn.execute(
            "DELETE FROM resource_permission "
            "WHERE resource_id = %s AND user_id = %s AND team_id = %s AND role = %s",
            (resource_id, user_id, team_id, role or ""),
        )

    async def replace_for_resource(
        self, resource_id: int, entries: list[PermissionEntry]
    ) -> None:
        """Delete all entries of resource and insert the given ones."""
        await self._conn.execute(
            "DELETE FROM resource_permission WHERE resource_id = %s",
            (resource_id,),
        )
        for entry in entries:
            await self.upsert(entry)
