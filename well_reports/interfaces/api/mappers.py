"""
Mappers for converting between domain entities and API schemas.
Keeps the domain layer separate from the API layer.
"""
from typing import Any, Dict

from ...application.services.report_service import ReportPage
from ...domain.entities.report import Report, ReportView
from ...domain.entities.user import User
from ...domain.entities.well import Well
from .schemas import (
    ReportPageResponse,
    ReportRecordResponse,
    ReportResponse,
    UserRefResponse,
    UserResponse,
    WellRefResponse,
    WellResponse,
)


class UserMapper:
    @staticmethod
    def entity_to_response(entity: User) -> UserResponse:
        return UserResponse(id=entity.id, username=entity.username, role=entity.role)


class WellMapper:
    @staticmethod
    def entity_to_response(entity: Well) -> WellResponse:
        return WellResponse(
            id=entity.id,
            name=entity.name,
            location=entity.location,
            created_at=entity.created_at
        )


class ReportMapper:
    @staticmethod
    def entity_to_response(entity: Report) -> ReportRecordResponse:
        return ReportRecordResponse(
            id=entity.id,
            title=entity.title,
            content=entity.content,
            pressure=entity.pressure,
            well_status=entity.well_status,
            temperature=entity.temperature,
            created_by=entity.created_by,
            well=entity.well_id,
            created_at=entity.created_at
        )

    @staticmethod
    def view_to_response(view: ReportView) -> ReportResponse:
        return ReportResponse(
            id=view.id,
            title=view.title,
            content=view.content,
            pressure=view.pressure,
            well_status=view.well_status,
            temperature=view.temperature,
            created_by=UserRefResponse(**view.created_by.model_dump()) if view.created_by else None,
            well=WellRefResponse(**view.well.model_dump()) if view.well else None,
            created_at=view.created_at
        )

    @staticmethod
    def page_to_response(page: ReportPage) -> ReportPageResponse:
        return ReportPageResponse(
            items=[ReportMapper.view_to_response(v) for v in page.items],
            total_pages=page.total_pages,
            current_page=page.current_page
        )


def to_payload(model: Any) -> Dict[str, Any]:
    """Dump an API schema into JSON-ready data using its public (alias) field names."""
    return model.model_dump(by_alias=True, mode="json")
