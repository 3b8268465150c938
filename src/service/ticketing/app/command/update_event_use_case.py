from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import EventNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class UpdateEventUseCase:
    def __init__(
        self, *, event_command_repo: IEventCommandRepo, event_query_repo: IEventQueryRepo
    ) -> None:
        self.event_command_repo = event_command_repo
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo, event_query_repo=event_query_repo)

    @Logger.io
    async def update(self, *, event_id: int, **changes: Any) -> EventEntity:
        """
        Partial update; capacity is an absolute value, not a delta.
        Tickets already issued keep the price they were sold at.
        """
        cleaned = EventEntity.clean_changes(**changes)
        if not cleaned:
            event = await self.event_query_repo.get_by_id(event_id=event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            return event

        updated = await self.event_command_repo.update_fields(event_id=event_id, changes=cleaned)
        if updated is None:
            raise EventNotFoundError(event_id)

        Logger.base.info(f'✏️ [EVENT] Updated event {event_id}: {sorted(cleaned)}')
        return updated
