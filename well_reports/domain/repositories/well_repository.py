from abc import ABC, abstractmethod
from typing import List
from ..entities.well import Well


class WellRepository(ABC):
    """Repository interface for wells."""

    @abstractmethod
    async def save(self, well: Well) -> Well:
        """Persist a new well."""
        pass

    @abstractmethod
    async def get_all(self) -> List[Well]:
        """Get all wells in insertion order."""
        pass

    @abstractmethod
    async def delete(self, well_id: str) -> bool:
        """Delete a well by id. Returns False when nothing was deleted."""
        pass
