from datetime import datetime
from typing import Optional

import attrs

from src.service.ticketing.domain.enum.ticket_status import TicketStatus


@attrs.frozen
class UserSummary:
    id: int
    name: str
    email: str
    hp: str
    address: str


@attrs.frozen
class EventSummary:
    id: int
    name: str
    description: str


@attrs.frozen
class TicketDetail:
    """Read model: ticket columns plus the purchasing user and the event, loaded in one query"""

    id: int
    user_id: int
    event_id: int
    quantity: int
    unit_price: float
    total_amount: float
    status: TicketStatus
    user: UserSummary
    event: EventSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
