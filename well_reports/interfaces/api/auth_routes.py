"""
Registration and login routes. Neither route is gated.
"""
from fastapi import APIRouter, Depends, status

from ...application.services.auth_service import AuthService
from ...shared.dependencies import provide_auth_service
from ...shared.responses import ResponseBuilder, SuccessResponse
from .dependencies import get_request_id
from .mappers import UserMapper, to_payload
from .schemas import LoginRequest, LoginResponse, RegisterRequest

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def register(
    payload: RegisterRequest,
    service: AuthService = Depends(provide_auth_service),
    request_id: str = Depends(get_request_id)
):
    """Create a user account with the given role."""
    user = await service.register(payload.username, payload.password, payload.role)
    return ResponseBuilder.success(
        data=to_payload(UserMapper.entity_to_response(user)),
        message="User registered",
        request_id=request_id
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    service: AuthService = Depends(provide_auth_service)
):
    """Exchange credentials for a bearer token."""
    result = await service.login(payload.username, payload.password)
    return LoginResponse(token=result.token, role=result.role)
