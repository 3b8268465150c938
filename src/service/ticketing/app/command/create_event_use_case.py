from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class CreateEventUseCase:
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
    async def create(
        self, *, name: str, description: str, price: float, capacity: int
    ) -> EventEntity:
        """
        Raises:
            ValidationError: any field out of range
            ConflictError: an event with this name already exists
        """
        event = EventEntity.create(
            name=name, description=description, price=price, capacity=capacity
        )
        created = await self.event_command_repo.create(event=event)

        Logger.base.info(
            f'🎪 [EVENT] Created event {created.id} "{created.name}" capacity={created.capacity}'
        )
        return created
