"""
Unit of Work - owns one database transaction and the repositories bound to it

Usage:
    async with uow:
        event = await uow.event_query_repo.get_by_id(event_id=event_id)
        ticket_id = await uow.ticket_command_repo.insert_ticket(ticket=ticket)
        await uow.ticket_command_repo.decrement_capacity(event_id=event_id, quantity=quantity)
        await uow.commit()

Leaving the block without commit() rolls everything back.
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
    from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
    from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo


class AbstractUnitOfWork(abc.ABC):
    ticket_command_repo: ITicketCommandRepo
    ticket_query_repo: ITicketQueryRepo
    event_query_repo: IEventQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.ticketing.driven_adapter.repo.event_query_repo_impl import (
            EventQueryRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.ticket_command_repo_impl import (
            TicketCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.ticket_query_repo_impl import (
            TicketQueryRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Repositories share the unit's session
        self.ticket_command_repo = TicketCommandRepoImpl(session=self.session)
        self.ticket_query_repo = TicketQueryRepoImpl(session=self.session)
        self.event_query_repo = EventQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._session_cm is not None:
                await self._session_cm.__aexit__(*args)
            self._session_cm = None
            self.session = None

    async def _commit(self) -> None:
        assert self.session is not None
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
