from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.monthly_sales import MonthlySalesRow
from src.service.ticketing.domain.value_object.ticket_detail import (
    EventSummary,
    TicketDetail,
    UserSummary,
)
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel


class TicketQueryRepoImpl(ITicketQueryRepo):
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

    @staticmethod
    def _detail_query() -> Select[Any]:
        # Users and events are joined even when soft-deleted; the ticket is history
        return (
            select(TicketModel, UserModel, EventModel)
            .join(UserModel, UserModel.id == TicketModel.user_id)
            .join(EventModel, EventModel.id == TicketModel.event_id)
            .where(TicketModel.deleted_at.is_(None))
        )

    @staticmethod
    def _to_entity(ticket_model: TicketModel) -> TicketEntity:
        return TicketEntity(
            id=ticket_model.id,
            user_id=ticket_model.user_id,
            event_id=ticket_model.event_id,
            quantity=ticket_model.quantity,
            unit_price=ticket_model.unit_price,
            total_amount=ticket_model.total_amount,
            status=TicketStatus(ticket_model.status),
            created_at=ticket_model.created_at,
            updated_at=ticket_model.updated_at,
        )

    @staticmethod
    def _to_detail(
        ticket_model: TicketModel, user_model: UserModel, event_model: EventModel
    ) -> TicketDetail:
        return TicketDetail(
            id=ticket_model.id,
            user_id=ticket_model.user_id,
            event_id=ticket_model.event_id,
            quantity=ticket_model.quantity,
            unit_price=ticket_model.unit_price,
            total_amount=ticket_model.total_amount,
            status=TicketStatus(ticket_model.status),
            created_at=ticket_model.created_at,
            updated_at=ticket_model.updated_at,
            user=UserSummary(
                id=user_model.id,
                name=user_model.name,
                email=user_model.email,
                hp=user_model.hp,
                address=user_model.address,
            ),
            event=EventSummary(
                id=event_model.id,
                name=event_model.name,
                description=event_model.description,
            ),
        )

    @Logger.io
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketModel).where(
                    TicketModel.id == ticket_id, TicketModel.deleted_at.is_(None)
                )
            )
            ticket_model = result.scalar_one_or_none()
            return self._to_entity(ticket_model) if ticket_model else None

    @Logger.io
    async def get_detail_by_id(self, *, ticket_id: int) -> Optional[TicketDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                self._detail_query().where(TicketModel.id == ticket_id)
            )
            row = result.one_or_none()
            if row is None:
                return None
            return self._to_detail(*row)

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[TicketDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                self._detail_query()
                .where(TicketModel.user_id == user_id)
                .order_by(TicketModel.id.desc())
            )
            return [self._to_detail(*row) for row in result.all()]

    @Logger.io
    async def list_all(self) -> List[TicketDetail]:
        async with self._get_session() as session:
            result = await session.execute(self._detail_query().order_by(TicketModel.id.desc()))
            return [self._to_detail(*row) for row in result.all()]

    @Logger.io
    async def monthly_sales_report(self) -> List[MonthlySalesRow]:
        async with self._get_session() as session:
            month = self._month_expression(session.get_bind().dialect.name)
            stmt = (
                select(
                    month.label('month'),
                    EventModel.id,
                    EventModel.name,
                    EventModel.description,
                    func.sum(TicketModel.quantity).label('total_qty'),
                    func.sum(TicketModel.total_amount).label('total_sales'),
                )
                .join(EventModel, EventModel.id == TicketModel.event_id)
                .where(
                    TicketModel.status == TicketStatus.CONFIRMED.value,
                    TicketModel.deleted_at.is_(None),
                )
                .group_by(month, EventModel.id, EventModel.name, EventModel.description)
                .order_by(month, EventModel.id)
            )
            result = await session.execute(stmt)

            return [
                MonthlySalesRow(
                    month=row.month,
                    event_id=row.id,
                    event_name=row.name,
                    event_description=row.description,
                    total_qty=int(row.total_qty or 0),
                    total_sales=float(row.total_sales or 0),
                )
                for row in result.all()
            ]

    @staticmethod
    def _month_expression(dialect_name: str) -> Any:
        if dialect_name == 'sqlite':
            return func.strftime('%Y-%m', TicketModel.created_at)
        return func.to_char(TicketModel.created_at, 'YYYY-MM')
