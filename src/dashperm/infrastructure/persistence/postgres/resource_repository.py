"""PostgreSQL resource (dashboard/folder) repository implementation."""

from psycopg import AsyncConnection

from dashperm.domain.entities import Resource

_COLUMNS = "id, org_id, uid, title, slug, is_folder, folder_id"


def _row_to_resource(r: tuple) -> Resource:
    return Resource(
        id=r[0],
        org_id=r[1],
        uid=r[2],
        title=r[3],
        slug=r[4],
        is_folder=r[5],
        folder_id=r[6] or 0,
    )


class PostgresResourceRepository:
    """Resource repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, org_id: int, resource_id: int) -> Resource | None:
        """Get dashboard or folder by numeric id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM resource WHERE org_id = %s AND id = %s",
            (org_id, resource_id),
        )
        r = await cur.fetchone()
        return _row_to_resource(r) if r else None

    async def get_by_uid(
        self, org_id: int, uid: str, *, for_update: bool = False
    ) -> Resource | None:
        """Get dashboard or folder by uid, optionally locking the row."""
        sql = f"SELECT {_COLUMNS} FROM resource WHERE org_id = %s AND uid = %s"
        if for_update:
            sql += " FOR UPDATE"
        cur = await self._conn.execute(sql, (org_id, uid))
        r = await cur.fetchone()
        return _row_to_resource(r) if r else None
