from typing import Any

from ...domain.entities.report import Report, ReportView, UserRef, WellRef
from ...domain.ports.repository import QueryPagination, RepositoryResult
from ...domain.repositories.report_repository import ReportRepository
from ...shared.schema import ReportSchema
from ...shared.utils.timing_decorator import async_timed
from .duckdb_base import DuckDBRepository


class DuckDBReportRepository(DuckDBRepository, ReportRepository):
    """DuckDB implementation of the report repository."""

    schema = ReportSchema

    # LEFT JOINs: a report whose author or well is gone still lists, with that side NULL
    _PAGE_QUERY = """
    SELECT
        r.id, r.title, r.content, r.pressure, r.well_status, r.temperature, r.created_at,
        u.id AS author_id, u.username AS author_username,
        w.id AS well_ref_id, w.name AS well_name
    FROM reports r
    LEFT JOIN users u ON u.id = r.created_by
    LEFT JOIN wells w ON w.id = r.well_id
    ORDER BY r.seq
    LIMIT ? OFFSET ?
    """

    async def save(self, report: Report) -> Report:
        """Persist a new report."""
        params = [getattr(report, col) for col in ReportSchema.get_column_names()]

        def _save(conn):
            conn.execute(ReportSchema.get_sql_insert(), params)
            return report

        return await self._run("save", "Error adding report", _save)

    @async_timed
    async def find_page(self, pagination: QueryPagination) -> RepositoryResult[ReportView]:
        """Get one page of reports with author and well resolved."""
        def _find_page(conn):
            rows = conn.execute(self._PAGE_QUERY, [pagination.limit, pagination.offset]).fetchall()
            total = conn.execute("SELECT COUNT(*) FROM reports").fetchone()[0]
            return rows, total

        rows, total = await self._run("find_page", "Error fetching reports", _find_page)
        return RepositoryResult(items=[self._row_to_view(row) for row in rows], total_count=int(total))

    async def delete(self, report_id: str) -> bool:
        """Delete a report by id."""
        def _delete(conn):
            return conn.execute("DELETE FROM reports WHERE id = ? RETURNING id", [report_id]).fetchall()

        deleted = await self._run("delete", "Error deleting report", _delete)
        return len(deleted) > 0

    @staticmethod
    def _row_to_view(row: Any) -> ReportView:
        (report_id, title, content, pressure, well_status, temperature, created_at,
         author_id, author_username, well_ref_id, well_name) = row
        return ReportView(
            id=report_id,
            title=title,
            content=content,
            pressure=pressure,
            well_status=well_status,
            temperature=temperature,
            created_at=created_at,
            created_by=UserRef(id=author_id, username=author_username) if author_id is not None else None,
            well=WellRef(id=well_ref_id, name=well_name) if well_ref_id is not None else None,
        )
