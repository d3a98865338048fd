from typing import List

from ...domain.entities.well import Well
from ...domain.repositories.well_repository import WellRepository
from ...shared.schema import WellSchema
from ...shared.utils.timing_decorator import async_timed
from .duckdb_base import DuckDBRepository


class DuckDBWellRepository(DuckDBRepository, WellRepository):
    """DuckDB implementation of the well repository."""

    schema = WellSchema

    async def save(self, well: Well) -> Well:
        """Persist a new well."""
        params = [getattr(well, col) for col in WellSchema.get_column_names()]

        def _save(conn):
            conn.execute(WellSchema.get_sql_insert(), params)
            return well

        return await self._run("save", "Error creating well", _save)

    @async_timed
    async def get_all(self) -> List[Well]:
        """Get all wells in insertion order."""
        query = f"SELECT {', '.join(WellSchema.get_column_names())} FROM wells ORDER BY seq"

        def _get_all(conn):
            return conn.execute(query).fetchall()

        rows = await self._run("get_all", "Error fetching wells", _get_all)
        return [Well(**self._row_to_dict(row)) for row in rows]

    async def delete(self, well_id: str) -> bool:
        """Delete a well by id. Reports pointing at it are left dangling."""
        def _delete(conn):
            return conn.execute("DELETE FROM wells WHERE id = ? RETURNING id", [well_id]).fetchall()

        deleted = await self._run("delete", "Error deleting well", _delete)
        return len(deleted) > 0
