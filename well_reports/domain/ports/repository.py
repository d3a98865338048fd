"""
Repository value objects shared by the concrete repository ports.
"""

from typing import List, Generic, TypeVar
from dataclasses import dataclass

# Generic type for entities
EntityType = TypeVar('EntityType')

# DuckDB rejects LIMIT / OFFSET values of 2**62 and above
MAX_WINDOW = 2 ** 62 - 1


@dataclass(frozen=True)
class QueryPagination:
    """Value object for pagination."""
    offset: int = 0
    limit: int = 4

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError("Offset must be non-negative")
        if self.limit <= 0:
            raise ValueError("Limit must be positive")

    @classmethod
    def for_page(cls, page: int, limit: int) -> 'QueryPagination':
        """Build pagination for a 1-based page number.

        Both values are clamped to the range the store accepts: an
        oversized limit means "everything", an oversized page lands past the end.
        """
        limit = min(limit, MAX_WINDOW)
        offset = min((page - 1) * limit, MAX_WINDOW)
        return cls(offset=offset, limit=limit)


@dataclass
class RepositoryResult(Generic[EntityType]):
    """Result container for repository operations."""
    items: List[EntityType]
    total_count: int
