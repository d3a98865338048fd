import logging
import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from ...domain.entities.report import Report, ReportView
from ...domain.ports.repository import QueryPagination
from ...domain.repositories.report_repository import ReportRepository
from ...domain.value_objects.identity import Identity
from ...shared.exceptions import NotFoundException, ValidationException
from .validation import require_fields

logger = logging.getLogger(__name__)


@dataclass
class ReportPage:
    """One page of the report listing."""
    items: List[ReportView]
    total_pages: int
    current_page: int


def parse_positive_int(raw: Optional[str], default: int, field: str) -> int:
    """
    Lenient integer parse for paging parameters.

    Missing, non-numeric and zero values fall back to `default`; a leading
    integer prefix is honoured ("3abc" -> 3). Negative values are rejected.
    """
    if raw is None:
        return default
    text = raw.strip()
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        value = int(digits)
    except ValueError:
        return default
    if value < 0:
        raise ValidationException(message=f"{field} must be a positive integer", field=field, value=raw)
    return value or default


class ReportService:
    def __init__(self, repository: ReportRepository, default_page_size: int = 4):
        self.repository = repository
        self.default_page_size = default_page_size

    async def create_report(
        self,
        identity: Identity,
        title: Optional[str],
        content: Optional[str],
        pressure: Optional[float],
        well_status: Optional[str],
        temperature: Optional[float],
        well_id: Optional[str],
    ) -> Report:
        """
        File a report on behalf of the authenticated identity.

        The well id is stored as given; it is not checked against existing wells.
        """
        require_fields({
            "title": title,
            "content": content,
            "pressure": pressure,
            "wellStatus": well_status,
            "temperature": temperature,
            "well": well_id,
        })
        report = Report(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            pressure=pressure,
            well_status=well_status,
            temperature=temperature,
            created_by=identity.user_id,
            well_id=well_id,
            created_at=datetime.now(timezone.utc).replace(tzinfo=None),
        )
        saved = await self.repository.save(report)
        logger.info(f"Report {saved.id} added by {identity.user_id} for well {well_id}")
        return saved

    async def list_reports(self, page: int = 1, limit: Optional[int] = None) -> ReportPage:
        """
        Get one page of reports.

        `limit` has no upper bound: a large enough limit returns every report.
        A page past the end yields no items rather than an error.
        """
        limit = limit or self.default_page_size
        if page < 1 or limit < 1:
            raise ValidationException(message="page and limit must be positive integers")

        result = await self.repository.find_page(QueryPagination.for_page(page, limit))
        return ReportPage(
            items=result.items,
            total_pages=math.ceil(result.total_count / limit),
            current_page=page,
        )

    async def delete_report(self, report_id: str) -> None:
        if not await self.repository.delete(report_id):
            raise NotFoundException("Report not found.", entity="report", entity_id=report_id)
        logger.info(f"Deleted report {report_id}")
