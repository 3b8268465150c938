from typing import Any
from unittest.mock import AsyncMock, MagicMock

from src.platform.config.core_setting import TransitionMode
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.ticket_detail import (
    EventSummary,
    TicketDetail,
    UserSummary,
)


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work over AsyncMock repositories; records commits and rollbacks"""

    def __init__(self) -> None:
        self.ticket_command_repo = AsyncMock()
        self.ticket_query_repo = AsyncMock()
        self.event_query_repo = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        if not self.committed:
            self.rolled_back = True


def make_settings(
    *,
    mode: TransitionMode = TransitionMode.STRICT,
    restore: bool = False,
    page_size_default: int = 10,
    page_size_max: int = 100,
) -> MagicMock:
    settings = MagicMock()
    settings.TICKET_STATUS_TRANSITION_MODE = mode
    settings.CANCEL_RESTORES_CAPACITY = restore
    settings.EVENT_PAGE_SIZE_DEFAULT = page_size_default
    settings.EVENT_PAGE_SIZE_MAX = page_size_max
    return settings


def make_ticket(**overrides: Any) -> TicketEntity:
    fields: dict[str, Any] = {
        'id': 1,
        'user_id': 7,
        'event_id': 1,
        'quantity': 3,
        'unit_price': 10.0,
        'total_amount': 30.0,
        'status': TicketStatus.WAITING,
    }
    fields.update(overrides)
    return TicketEntity(**fields)


def make_detail(ticket: TicketEntity, *, status: TicketStatus | None = None) -> TicketDetail:
    assert ticket.id is not None
    return TicketDetail(
        id=ticket.id,
        user_id=ticket.user_id,
        event_id=ticket.event_id,
        quantity=ticket.quantity,
        unit_price=ticket.unit_price,
        total_amount=ticket.total_amount,
        status=status or ticket.status,
        user=UserSummary(
            id=ticket.user_id, name='Buyer', email='buyer@test.com', hp='0912', address='Taipei'
        ),
        event=EventSummary(id=ticket.event_id, name='Jazz Night', description='Live music'),
    )
