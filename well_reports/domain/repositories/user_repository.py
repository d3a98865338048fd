from abc import ABC, abstractmethod
from typing import Optional
from ..entities.user import User


class UserRepository(ABC):
    """Repository interface for registered users (the credential store)."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist a new user."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get the first stored user with this username, if any."""
        pass
