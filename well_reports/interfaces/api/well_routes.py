"""
Well routes: admins create and delete, any authenticated user lists.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ...application.services.well_service import WellService
from ...domain.value_objects.identity import Identity
from ...shared.dependencies import provide_well_service
from ...shared.responses import ResponseBuilder, SuccessResponse
from .dependencies import get_request_id, require_admin, require_authenticated
from .mappers import WellMapper, to_payload
from .schemas import WellCreateRequest, WellResponse

router = APIRouter(prefix="/wells", tags=["wells"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_well(
    payload: WellCreateRequest,
    identity: Identity = Depends(require_admin),
    service: WellService = Depends(provide_well_service),
    request_id: str = Depends(get_request_id)
):
    well = await service.create_well(payload.name, payload.location)
    return ResponseBuilder.success(
        data=to_payload(WellMapper.entity_to_response(well)),
        message="Well created",
        request_id=request_id
    )


@router.get("", response_model=List[WellResponse])
async def list_wells(
    identity: Identity = Depends(require_authenticated),
    service: WellService = Depends(provide_well_service)
):
    """Every well, in insertion order."""
    wells = await service.list_wells()
    return [WellMapper.entity_to_response(w) for w in wells]


@router.delete("/{well_id}", response_model=SuccessResponse)
async def delete_well(
    well_id: str,
    identity: Identity = Depends(require_admin),
    service: WellService = Depends(provide_well_service),
    request_id: str = Depends(get_request_id)
):
    await service.delete_well(well_id)
    return ResponseBuilder.success(
        data={"id": well_id},
        message="Well deleted",
        request_id=request_id
    )
