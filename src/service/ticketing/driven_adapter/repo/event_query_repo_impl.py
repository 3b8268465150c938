from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.value_object.page import PageRequest
from src.service.ticketing.driven_adapter.model.event_model import EventModel


def escape_like(term: str) -> str:
    return term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def event_model_to_entity(event_model: EventModel) -> EventEntity:
    return EventEntity(
        id=event_model.id,
        name=event_model.name,
        description=event_model.description,
        price=event_model.price,
        capacity=event_model.capacity,
        status=EventStatus(event_model.status),
        created_at=event_model.created_at,
        updated_at=event_model.updated_at,
    )


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """Use the unit-of-work session when injected, otherwise open a short-lived one."""
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EventModel).where(EventModel.id == event_id, EventModel.deleted_at.is_(None))
            )
            event_model = result.scalar_one_or_none()

            if not event_model:
                return None

            return event_model_to_entity(event_model)

    @Logger.io
    async def list_paginated(self, *, page_request: PageRequest) -> Tuple[List[EventEntity], int]:
        conditions = [EventModel.deleted_at.is_(None)]
        if page_request.search:
            conditions.append(
                EventModel.name.ilike(f'%{escape_like(page_request.search)}%', escape='\\')
            )

        async with self._get_session() as session:
            total = await session.scalar(
                select(func.count()).select_from(EventModel).where(*conditions)
            )
            result = await session.execute(
                select(EventModel)
                .where(*conditions)
                .order_by(EventModel.id.desc())
                .offset(page_request.offset)
                .limit(page_request.page_size)
            )
            events = [event_model_to_entity(m) for m in result.scalars().all()]

        return events, int(total or 0)
