from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.value_object.ticket_detail import TicketDetail


class ListTicketsUseCase:
    def __init__(self, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[TicketDetail]:
        tickets = await self.ticket_query_repo.list_by_user(user_id=user_id)
        Logger.base.info(f'📋 [LIST_TICKETS] User {user_id} has {len(tickets)} tickets')
        return tickets

    @Logger.io
    async def list_all(self) -> List[TicketDetail]:
        return await self.ticket_query_repo.list_all()
