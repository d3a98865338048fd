from abc import ABC, abstractmethod

from ..value_objects.identity import Claims


class PasswordHasherPort(ABC):
    """One-way salted password hashing."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Hash a password. The result embeds its own salt."""
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a stored hash. Mismatch is False, not an error."""
        pass


class TokenServicePort(ABC):
    """Issues and verifies signed identity tokens."""

    @abstractmethod
    def issue(self, claims: Claims) -> str:
        """Sign the claims into a compact token."""
        pass

    @abstractmethod
    def verify(self, token: str) -> Claims:
        """Return the claims of a valid token; raise InvalidTokenException otherwise."""
        pass
