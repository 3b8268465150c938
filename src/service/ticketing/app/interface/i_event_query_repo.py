from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.value_object.page import PageRequest


class IEventQueryRepo(ABC):
    """Event Query Repository - soft-deleted events are invisible"""

    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_paginated(self, *, page_request: PageRequest) -> Tuple[List[EventEntity], int]:
        """
        Case-insensitive substring search on name, newest first.

        Returns:
            (events on the requested page, total matching events)
        """
        pass
