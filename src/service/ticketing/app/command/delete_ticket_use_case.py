from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger


class DeleteTicketUseCase:
    """Soft delete; the event capacity is left as it is"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def delete(self, *, ticket_id: int) -> None:
        async with self.uow:
            affected = await self.uow.ticket_command_repo.soft_delete(ticket_id=ticket_id)
            if affected == 0:
                raise NotFoundError('ticket not found')
            await self.uow.commit()

        Logger.base.info(f'🗑️ [TICKET] Ticket {ticket_id} deleted')
