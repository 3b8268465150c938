"""
Issue Ticket Use Case

The one write path that consumes event capacity:
1. Validate the request (no storage access on failure)
2. Read the event; reject early when capacity is already short
3. In one unit of work insert the ticket and run the guarded decrement
4. Commit, then return the ticket joined with user and event summaries
"""

import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    EventNotFoundError,
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.validators import raise_if_invalid, validate_ticket_request
from src.service.ticketing.domain.value_object.ticket_detail import TicketDetail


class IssueTicketUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def issue(self, *, user_id: int, event_id: int, quantity: int) -> TicketDetail:
        """
        Raises:
            ValidationError: quantity (or ids) malformed
            EventNotFoundError: no live event with event_id
            InsufficientStockError: quantity exceeds capacity, read early or at the guarded write
        """
        started = time.perf_counter()
        outcome = 'error'
        try:
            detail = await self._issue(user_id=user_id, event_id=event_id, quantity=quantity)
            outcome = 'success'
            return detail
        except ValidationError:
            outcome = 'invalid'
            raise
        except EventNotFoundError:
            outcome = 'not_found'
            raise
        except InsufficientStockError as e:
            outcome = 'quantity_conflict' if e.lost_race else 'insufficient_stock'
            raise
        finally:
            metrics.record_ticket_issue(
                result=outcome,
                duration=time.perf_counter() - started,
                event_id=event_id,
                quantity=quantity if outcome == 'success' else 0,
            )

    async def _issue(self, *, user_id: int, event_id: int, quantity: int) -> TicketDetail:
        raise_if_invalid(
            validate_ticket_request(user_id=user_id, event_id=event_id, quantity=quantity)
        )

        with self.tracer.start_as_current_span(
            'use_case.issue_ticket',
            attributes={'event.id': event_id, 'ticket.quantity': quantity},
        ):
            async with self.uow:
                event = await self.uow.event_query_repo.get_by_id(event_id=event_id)
                if event is None:
                    raise EventNotFoundError(event_id)

                if quantity > event.capacity:
                    raise InsufficientStockError(event_id=event_id, requested=quantity)

                ticket = TicketEntity.create(user_id=user_id, event=event, quantity=quantity)
                saved = await self.uow.ticket_command_repo.insert_ticket(ticket=ticket)

                affected = await self.uow.ticket_command_repo.decrement_capacity(
                    event_id=event_id, quantity=quantity
                )
                if affected == 0:
                    # Capacity moved between the read and the write; leaving the
                    # block without commit discards the inserted ticket
                    Logger.base.warning(
                        f'⚠️ [ISSUE] Lost capacity race on event {event_id} (qty={quantity})'
                    )
                    raise InsufficientStockError(
                        event_id=event_id, requested=quantity, lost_race=True
                    )

                await self.uow.commit()

                assert saved.id is not None
                detail = await self.uow.ticket_query_repo.get_detail_by_id(ticket_id=saved.id)

            if detail is None:
                raise NotFoundError('ticket not found')

            Logger.base.info(
                f'🎫 [ISSUE] Ticket {detail.id} issued: event={event_id} user={user_id} '
                f'qty={quantity} total={detail.total_amount}'
            )
            return detail

