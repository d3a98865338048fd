import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from ...domain.entities.well import Well
from ...domain.repositories.well_repository import WellRepository
from ...shared.exceptions import NotFoundException
from .validation import require_fields

logger = logging.getLogger(__name__)


class WellService:
    def __init__(self, repository: WellRepository):
        self.repository = repository

    async def create_well(self, name: Optional[str], location: Optional[str]) -> Well:
        require_fields({"name": name, "location": location})
        well = Well(
            id=uuid.uuid4().hex,
            name=name,
            location=location,
            created_at=datetime.now(timezone.utc).replace(tzinfo=None),
        )
        saved = await self.repository.save(well)
        logger.info(f"Created well {saved.id} ({saved.name!r})")
        return saved

    async def list_wells(self) -> List[Well]:
        return await self.repository.get_all()

    async def delete_well(self, well_id: str) -> None:
        if not await self.repository.delete(well_id):
            raise NotFoundException("Well not found.", entity="well", entity_id=well_id)
        logger.info(f"Deleted well {well_id}")
