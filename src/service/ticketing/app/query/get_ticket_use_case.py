from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.value_object.ticket_detail import TicketDetail


class GetTicketUseCase:
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
    async def get_by_id(
        self, *, ticket_id: int, requester_id: int, requester_is_admin: bool
    ) -> TicketDetail:
        detail = await self.ticket_query_repo.get_detail_by_id(ticket_id=ticket_id)
        if detail is None:
            raise NotFoundError('ticket not found')

        if not requester_is_admin and detail.user_id != requester_id:
            raise ForbiddenError('Access denied: not your ticket')

        return detail
