"""
Ticket Command Repository Implementation - capacity ledger

All statements run on the unit-of-work session; nothing here commits.
The capacity guard lives in the WHERE clause so it is evaluated against the
row as it is at write time, not as it was when the caller read it.
"""

from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def insert_ticket(self, *, ticket: TicketEntity) -> TicketEntity:
        session = self.session
        ticket_model = TicketModel(
            user_id=ticket.user_id,
            event_id=ticket.event_id,
            quantity=ticket.quantity,
            unit_price=ticket.unit_price,
            total_amount=ticket.total_amount,
            status=ticket.status.value,
        )
        session.add(ticket_model)
        await session.flush()

        return TicketEntity(
            id=ticket_model.id,
            user_id=ticket_model.user_id,
            event_id=ticket_model.event_id,
            quantity=ticket_model.quantity,
            unit_price=ticket_model.unit_price,
            total_amount=ticket_model.total_amount,
            status=TicketStatus(ticket_model.status),
            created_at=ticket.created_at,
            updated_at=ticket.updated_at,
        )

    @Logger.io
    async def decrement_capacity(self, *, event_id: int, quantity: int) -> int:
        session = self.session
        result = await session.execute(
            update(EventModel)
            .where(
                EventModel.id == event_id,
                EventModel.deleted_at.is_(None),
                EventModel.capacity >= quantity,
            )
            .values(capacity=EventModel.capacity - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def increment_capacity(self, *, event_id: int, quantity: int) -> int:
        session = self.session
        result = await session.execute(
            update(EventModel)
            .where(EventModel.id == event_id, EventModel.deleted_at.is_(None))
            .values(capacity=EventModel.capacity + quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def update_status(
        self, *, ticket_id: int, expected_status: TicketStatus, new_status: TicketStatus
    ) -> int:
        session = self.session
        result = await session.execute(
            update(TicketModel)
            .where(
                TicketModel.id == ticket_id,
                TicketModel.deleted_at.is_(None),
                TicketModel.status == expected_status.value,
            )
            .values(status=new_status.value, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def soft_delete(self, *, ticket_id: int) -> int:
        session = self.session
        now = datetime.now(timezone.utc)
        result = await session.execute(
            update(TicketModel)
            .where(TicketModel.id == ticket_id, TicketModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
