import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ...domain.entities.user import User
from ...domain.ports.security import PasswordHasherPort, TokenServicePort
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.identity import Claims
from ...shared.exceptions import UnauthenticatedException
from .validation import require_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    role: str


class AuthService:
    """
    Registration and login. Neither path goes through the authorization gate.
    """

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasherPort,
        token_service: TokenServicePort
    ):
        self.repository = repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def register(self, username: Optional[str], password: Optional[str], role: Optional[str]) -> User:
        """
        Register a new user.

        Raises:
            ValidationException: When any field is missing
            ApplicationException: When hashing or storage fails
        """
        require_fields({"username": username, "password": password, "role": role})

        user = User(
            id=uuid.uuid4().hex,
            username=username,
            password_hash=self.password_hasher.hash(password),
            role=role,
            created_at=datetime.now(timezone.utc).replace(tzinfo=None),
        )
        saved = await self.repository.save(user)
        logger.info(f"Registered user {saved.username!r} with role {saved.role!r}")
        return saved

    async def login(self, username: Optional[str], password: Optional[str]) -> LoginResult:
        """
        Check credentials and issue a token.

        Raises:
            ValidationException: When username or password is missing
            UnauthenticatedException: When the user is unknown or the password does not match
        """
        require_fields(
            {"username": username, "password": password},
            message="Username and password are required."
        )

        user = await self.repository.get_by_username(username)
        if user is None or not self.password_hasher.verify(password, user.password_hash):
            logger.info(f"Login rejected for {username!r}")
            raise UnauthenticatedException("Invalid credentials")

        token = self.token_service.issue(Claims(subject=user.id, role=user.role))
        return LoginResult(token=token, role=user.role)
