from datetime import datetime, timezone
from typing import Any, AsyncContextManager, Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.repo.event_query_repo_impl import event_model_to_entity


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            event_model = EventModel(
                name=event.name,
                description=event.description,
                price=event.price,
                capacity=event.capacity,
                status=event.status.value,
            )
            session.add(event_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError('event already exist') from e

            await session.refresh(event_model)
            return event_model_to_entity(event_model)

    @Logger.io
    async def update_fields(
        self, *, event_id: int, changes: dict[str, Any]
    ) -> Optional[EventEntity]:
        values = {k: (v.value if hasattr(v, 'value') else v) for k, v in changes.items()}
        values['updated_at'] = datetime.now(timezone.utc)

        async with self.session_factory() as session:
            try:
                result = await session.execute(
                    update(EventModel)
                    .where(EventModel.id == event_id, EventModel.deleted_at.is_(None))
                    .values(**values)
                    .execution_options(synchronize_session=False)
                )
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError('event already exist') from e

            if result.rowcount == 0:  # type: ignore[attr-defined]
                await session.rollback()
                return None
            await session.commit()

            refreshed = await session.execute(select(EventModel).where(EventModel.id == event_id))
            return event_model_to_entity(refreshed.scalar_one())

    @Logger.io
    async def soft_delete(self, *, event_id: int) -> bool:
        now = datetime.now(timezone.utc)
        async with self.session_factory() as session:
            result = await session.execute(
                update(EventModel)
                .where(EventModel.id == event_id, EventModel.deleted_at.is_(None))
                .values(deleted_at=now, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            return result.rowcount == 1  # type: ignore[attr-defined]
