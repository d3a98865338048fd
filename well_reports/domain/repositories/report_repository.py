from abc import ABC, abstractmethod
from ..entities.report import Report, ReportView
from ..ports.repository import QueryPagination, RepositoryResult


class ReportRepository(ABC):
    """Repository interface for well reports."""

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Persist a new report."""
        pass

    @abstractmethod
    async def find_page(self, pagination: QueryPagination) -> RepositoryResult[ReportView]:
        """
        Get one page of reports in insertion order, with author and well resolved.

        Returns:
            RepositoryResult with the page items and the total number of reports
        """
        pass

    @abstractmethod
    async def delete(self, report_id: str) -> bool:
        """Delete a report by id. Returns False when nothing was deleted."""
        pass
