import logging
from datetime import datetime, timezone
from typing import Any, Dict

import jwt

from ...domain.ports.security import TokenServicePort
from ...domain.value_objects.identity import Claims
from ...shared.exceptions import InvalidTokenException, SecurityException

logger = logging.getLogger(__name__)


class JWTTokenService(TokenServicePort):
    """Signed (not encrypted) JWTs carrying `sub`, `role` and `iat`.

    Tokens carry no `exp` claim and stay valid until the secret changes.
    Changing the secret invalidates every token issued before.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def issue(self, claims: Claims) -> str:
        payload: Dict[str, Any] = {
            "sub": claims.subject,
            "role": claims.role,
            "iat": claims.issued_at if claims.issued_at is not None else int(datetime.now(timezone.utc).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error(f"Token signing failed: {type(e).__name__}")
            raise SecurityException("Error logging in", cause=e)

    def verify(self, token: str) -> Claims:
        if not token:
            raise InvalidTokenException("token_blank")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "role"]},
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenException(f"token_invalid:{type(e).__name__}", cause=e)

        subject = payload.get("sub")
        role = payload.get("role")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenException("token_bad_sub")
        if not isinstance(role, str):
            raise InvalidTokenException("token_bad_role")

        issued_at = payload.get("iat")
        return Claims(subject=subject, role=role, issued_at=issued_at if isinstance(issued_at, int) else None)
