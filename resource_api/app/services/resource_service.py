"""
Service layer for resources.

``ResourceService`` translates resource operations into parameterised
SQL against the shared ``Database`` handle it is constructed with.
Every method is a single unit of work: one statement, plus a read-back
for ``create`` and ``update``.  Lookups that find nothing return
``None`` rather than raising.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from resource_api.app.core.db import SQL_TOUCH_UPDATED_AT, Database
from resource_api.app.schemas.resource import (
    ResourceCreate,
    ResourceFilters,
    ResourceRead,
    ResourceUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "active"


class ResourceService:
    """Data access for the ``resources`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @property
    def conn(self) -> sqlite3.Connection:
        return self.database.connection

    def create(self, data: ResourceCreate) -> ResourceRead:
        """Insert a resource and return the stored row.

        Empty optional fields are stored as NULL and an empty status
        falls back to ``"active"``.
        """
        cursor = self.conn.execute(
            """
            INSERT INTO resources (name, description, category, status)
            VALUES (?, ?, ?, ?)
            """,
            (
                data.name,
                data.description or None,
                data.category or None,
                data.status or DEFAULT_STATUS,
            ),
        )
        resource_id = cursor.lastrowid
        self.conn.commit()
        logger.info("Created resource %s", resource_id)
        return self.find_by_id(resource_id)

    def find_all(self, filters: Optional[ResourceFilters] = None) -> List[ResourceRead]:
        """Return resources matching ``filters``, most recent first.

        ``category`` and ``status`` must match exactly; ``name`` is a
        case-sensitive substring match.  Filters with empty values are
        ignored.
        """
        query = "SELECT * FROM resources"
        params: list = []
        where_clauses: list[str] = []
        if filters is not None:
            if filters.category:
                where_clauses.append("category = ?")
                params.append(filters.category)
            if filters.status:
                where_clauses.append("status = ?")
                params.append(filters.status)
            if filters.name:
                # instr() instead of LIKE: LIKE ignores ASCII case and
                # treats % and _ as wildcards.
                where_clauses.append("instr(name, ?) > 0")
                params.append(filters.name)
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        query += " ORDER BY created_at DESC, id DESC"
        rows = self.conn.execute(query, tuple(params)).fetchall()
        return [self._row_to_resource(row) for row in rows]

    def find_by_id(self, resource_id: int) -> Optional[ResourceRead]:
        row = self.conn.execute(
            "SELECT * FROM resources WHERE id = ?",
            (resource_id,),
        ).fetchone()
        if not row:
            return None
        return self._row_to_resource(row)

    def update(self, resource_id: int, data: ResourceUpdate) -> Optional[ResourceRead]:
        """Apply a partial update and return the updated row.

        Absent and empty fields are bound as NULL so ``COALESCE`` keeps
        the stored value; a field therefore cannot be cleared.
        ``updated_at`` moves forward on every call, by at least one
        millisecond.  Returns ``None`` if no resource has ``resource_id``.
        """
        cursor = self.conn.execute(
            f"""
            UPDATE resources
            SET name = COALESCE(?, name),
                description = COALESCE(?, description),
                category = COALESCE(?, category),
                status = COALESCE(?, status),
                updated_at = {SQL_TOUCH_UPDATED_AT}
            WHERE id = ?
            """,
            (
                data.name or None,
                data.description or None,
                data.category or None,
                data.status or None,
                resource_id,
            ),
        )
        self.conn.commit()
        if cursor.rowcount == 0:
            return None
        logger.info("Updated resource %s", resource_id)
        return self.find_by_id(resource_id)

    def delete(self, resource_id: int) -> bool:
        """Delete a resource.  Returns ``True`` if a row was removed."""
        cursor = self.conn.execute("DELETE FROM resources WHERE id = ?", (resource_id,))
        affected = cursor.rowcount
        self.conn.commit()
        if affected:
            logger.info("Deleted resource %s", resource_id)
        return affected > 0

    def count(self) -> int:
        row = self.conn.execute("SELECT COUNT(*) AS total FROM resources").fetchone()
        return row["total"]

    @staticmethod
    def _row_to_resource(row: sqlite3.Row) -> ResourceRead:
        return ResourceRead(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            category=row["category"],
            status=row["status"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
