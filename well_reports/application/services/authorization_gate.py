import logging
from typing import Optional

from ...domain.ports.security import TokenServicePort
from ...domain.value_objects.identity import Identity, Role
from ...shared.exceptions import (
    ForbiddenException,
    InvalidTokenException,
    UnauthenticatedException,
)

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """
    Admits or rejects one request based on its bearer token.

    `required_role=None` admits any authenticated identity. Otherwise the
    token's role must equal the required role exactly. The gate never touches
    storage; everything it needs is in the token.
    """

    def __init__(self, token_service: TokenServicePort, required_role: Optional[Role] = None):
        self.token_service = token_service
        self.required_role = required_role

    def admit(self, token: Optional[str], *, route: str = "") -> Identity:
        """
        Returns:
            The identity decoded from the token

        Raises:
            UnauthenticatedException: No token, or the token failed verification
            ForbiddenException: The token's role does not match the required role
        """
        if not token:
            logger.info(f"Rejected {route or 'request'}: no bearer token")
            raise UnauthenticatedException()

        try:
            claims = self.token_service.verify(token)
        except InvalidTokenException as e:
            logger.warning(f"Rejected {route or 'request'}: invalid token ({e.message})")
            raise UnauthenticatedException()

        identity = Identity.from_claims(claims)
        if not identity.role.satisfies(self.required_role):
            logger.info(
                f"Rejected {route or 'request'}: role {identity.role.name!r} "
                f"does not match required {self.required_role.name!r}"
            )
            raise ForbiddenException()

        return identity
