from abc import ABC, abstractmethod
from typing import Any, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    """Event Command Repository - event lifecycle writes"""

    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        """
        Raises:
            ConflictError: an event with the same name already exists
        """
        pass

    @abstractmethod
    async def update_fields(
        self, *, event_id: int, changes: dict[str, Any]
    ) -> Optional[EventEntity]:
        """
        Write only the given columns of a live event; capacity is set, not added.

        Returns:
            Updated event, or None when no live event matched

        Raises:
            ConflictError: renamed to a name that already exists
        """
        pass

    @abstractmethod
    async def soft_delete(self, *, event_id: int) -> bool:
        """Mark deleted; capacity is left untouched. False when no live event matched"""
        pass
