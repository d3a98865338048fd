import logging

from passlib.context import CryptContext

from ...domain.ports.security import PasswordHasherPort
from ...shared.exceptions import SecurityException
from ...shared.utils.timing_decorator import timed

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasherPort):
    """bcrypt via passlib. Hashes are "$2b$<rounds>$<salt><digest>", so the salt travels with them."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    @timed
    def hash(self, plaintext: str) -> str:
        if not plaintext:
            raise SecurityException("Error registering user")
        try:
            return self._context.hash(plaintext)
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed: {type(e).__name__}")
            raise SecurityException("Error registering user", cause=e)

    @timed
    def verify(self, plaintext: str, hashed: str) -> bool:
        if not plaintext or not hashed:
            return False
        try:
            return self._context.verify(plaintext, hashed)
        except (ValueError, TypeError):
            # unparseable stored hash counts as a mismatch
            logger.warning("Stored password hash could not be parsed")
            return False
