from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import EventNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo


class DeleteEventUseCase:
    def __init__(self, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @Logger.io
    async def delete(self, *, event_id: int) -> None:
        if not await self.event_command_repo.soft_delete(event_id=event_id):
            raise EventNotFoundError(event_id)
        Logger.base.info(f'🗑️ [EVENT] Event {event_id} deleted')
