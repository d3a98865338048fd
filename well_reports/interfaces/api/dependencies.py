import uuid
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...domain.value_objects.identity import ADMIN, OPERATOR, Identity, Role
from ...shared.dependencies import get_container

# auto_error=False: a missing header must become our own 401, not FastAPI's default response
_bearer = HTTPBearer(auto_error=False)


def get_request_id(request: Request) -> str:
    """Return the request id set by the middleware, or generate one."""
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
    return request_id


def require_identity(required_role: Optional[Role] = None) -> Callable[..., Identity]:
    """
    Use as Depends(require_identity(ADMIN)).

    Returns the caller's identity if the bearer token is valid and its role
    matches `required_role` (any role when None). The identity is also attached
    to `request.state.identity`.
    """

    def _gate(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    ) -> Identity:
        gate = get_container(request).get_gate(required_role)
        token = credentials.credentials if credentials is not None else None
        identity = gate.admit(token, route=f"{request.method} {request.url.path}")
        request.state.identity = identity
        return identity

    return _gate


require_authenticated = require_identity()
require_admin = require_identity(ADMIN)
require_operator = require_identity(OPERATOR)
