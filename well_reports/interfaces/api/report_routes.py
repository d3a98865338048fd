"""
Report routes: operators file reports, admins delete them, anyone
authenticated can page through the listing.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ...application.services.report_service import ReportService, parse_positive_int
from ...domain.value_objects.identity import Identity
from ...shared.dependencies import provide_report_service
from ...shared.responses import ResponseBuilder, SuccessResponse
from .dependencies import get_request_id, require_admin, require_authenticated, require_operator
from .mappers import ReportMapper, to_payload
from .schemas import ReportCreateRequest, ReportPageResponse

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_report(
    payload: ReportCreateRequest,
    identity: Identity = Depends(require_operator),
    service: ReportService = Depends(provide_report_service),
    request_id: str = Depends(get_request_id)
):
    """File a report; `createdBy` is taken from the token, never from the body."""
    report = await service.create_report(
        identity,
        title=payload.title,
        content=payload.content,
        pressure=payload.pressure,
        well_status=payload.well_status,
        temperature=payload.temperature,
        well_id=payload.well,
    )
    return ResponseBuilder.success(
        data=to_payload(ReportMapper.entity_to_response(report)),
        message="Report added",
        request_id=request_id
    )


# page and limit arrive as raw strings so that "abc" or "0" fall back to defaults
@router.get("", response_model=ReportPageResponse)
async def list_reports(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default from settings)"),
    identity: Identity = Depends(require_authenticated),
    service: ReportService = Depends(provide_report_service)
):
    page_number = parse_positive_int(page, 1, "page")
    page_size = parse_positive_int(limit, service.default_page_size, "limit")
    result = await service.list_reports(page=page_number, limit=page_size)
    return ReportMapper.page_to_response(result)


@router.delete("/{report_id}", response_model=SuccessResponse)
async def delete_report(
    report_id: str,
    identity: Identity = Depends(require_admin),
    service: ReportService = Depends(provide_report_service),
    request_id: str = Depends(get_request_id)
):
    await service.delete_report(report_id)
    return ResponseBuilder.success(
        data={"id": report_id},
        message="Report deleted",
        request_id=request_id
    )
