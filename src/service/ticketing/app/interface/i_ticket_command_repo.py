"""
Ticket Command Repository Interface

Owns the capacity ledger: every capacity change issued by ticket traffic is
a conditional single-statement UPDATE evaluated at write time. Callers run
these inside one unit of work and decide commit or rollback from the
returned row counts.
"""

from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def insert_ticket(self, *, ticket: TicketEntity) -> TicketEntity:
        """Insert within the current transaction (flushed, not committed) and return it with id"""
        pass

    @abstractmethod
    async def decrement_capacity(self, *, event_id: int, quantity: int) -> int:
        """
        capacity -= quantity WHERE capacity >= quantity on a live event.

        Returns:
            Affected rows: 1 on success, 0 when the guard failed
        """
        pass

    @abstractmethod
    async def increment_capacity(self, *, event_id: int, quantity: int) -> int:
        """
        capacity += quantity on a live event.

        Returns:
            Affected rows: 1 on success, 0 when the event is gone
        """
        pass

    @abstractmethod
    async def update_status(
        self, *, ticket_id: int, expected_status: TicketStatus, new_status: TicketStatus
    ) -> int:
        """
        Compare-and-set on status.

        Returns:
            Affected rows: 0 when the ticket is gone or its status moved on
        """
        pass

    @abstractmethod
    async def soft_delete(self, *, ticket_id: int) -> int:
        """Returns affected rows: 0 when no live ticket matched"""
        pass
