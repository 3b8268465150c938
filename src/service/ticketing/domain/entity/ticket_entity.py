from datetime import datetime, timezone
from typing import Mapping, Optional

import attrs

from src.platform.config.core_setting import TransitionMode
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.validators import raise_if_invalid, validate_quantity


# waiting -> confirmed | canceled; confirmed and canceled are terminal
STRICT_TRANSITIONS: Mapping[TicketStatus, frozenset[TicketStatus]] = {
    TicketStatus.WAITING: frozenset({TicketStatus.CONFIRMED, TicketStatus.CANCELED}),
    TicketStatus.CONFIRMED: frozenset(),
    TicketStatus.CANCELED: frozenset(),
}


def can_transition(
    current: TicketStatus, target: TicketStatus, *, mode: TransitionMode
) -> bool:
    if current == target:
        return True
    if mode == TransitionMode.PERMISSIVE:
        return True
    return target in STRICT_TRANSITIONS[current]


@attrs.define
class TicketEntity:
    """
    A purchase against one event.

    unit_price and total_amount are captured at purchase time and never
    recomputed; only status changes after creation.
    """

    user_id: int
    event_id: int
    quantity: int
    unit_price: float
    total_amount: float
    status: TicketStatus = TicketStatus.WAITING
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, user_id: int, event: EventEntity, quantity: int) -> 'TicketEntity':
        raise_if_invalid(validate_quantity(quantity))
        if event.id is None:
            raise DomainError('Event must be persisted before tickets can be issued')

        now = datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            event_id=event.id,
            quantity=quantity,
            unit_price=event.price,
            total_amount=quantity * event.price,
            status=TicketStatus.WAITING,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def transition_to(self, target: TicketStatus, *, mode: TransitionMode) -> 'TicketEntity':
        """
        Raises:
            DomainError: target not reachable from the current status under mode
        """
        if not can_transition(self.status, target, mode=mode):
            raise DomainError(
                f'Cannot change ticket status from {self.status.value} to {target.value}'
            )
        return attrs.evolve(self, status=target, updated_at=datetime.now(timezone.utc))

    def releases_capacity_on(self, target: TicketStatus) -> bool:
        """True when moving to target takes a live ticket into canceled."""
        return target == TicketStatus.CANCELED and self.status != TicketStatus.CANCELED

    def reclaims_capacity_on(self, target: TicketStatus) -> bool:
        """True when target revives a canceled ticket (only reachable in permissive mode)."""
        return self.status == TicketStatus.CANCELED and target != TicketStatus.CANCELED
