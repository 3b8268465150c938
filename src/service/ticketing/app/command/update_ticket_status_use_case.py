"""
Update Ticket Status Use Case

The status write is a compare-and-set on the status read at the start of the
unit of work, so two admins racing on one ticket cannot both apply a change.
Capacity moves with the status only when CANCEL_RESTORES_CAPACITY is on.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, InsufficientStockError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.validators import raise_if_invalid, validate_ticket_status
from src.service.ticketing.domain.value_object.ticket_detail import TicketDetail


class UpdateTicketStatusUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, settings: Settings) -> None:
        self.uow = uow
        self.settings = settings
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(uow=uow, settings=settings)

    @Logger.io
    async def set_status(self, *, ticket_id: int, new_status: str) -> TicketDetail:
        """
        Raises:
            ValidationError: unknown status value
            NotFoundError: no live ticket with ticket_id
            DomainError: transition not allowed under the configured mode
            ConflictError: status changed concurrently
            InsufficientStockError: reviving a canceled ticket with no capacity left
        """
        raise_if_invalid(validate_ticket_status(new_status))
        target = TicketStatus(new_status)

        with self.tracer.start_as_current_span(
            'use_case.update_ticket_status',
            attributes={'ticket.id': ticket_id, 'ticket.status': target.value},
        ):
            async with self.uow:
                ticket = await self.uow.ticket_query_repo.get_by_id(ticket_id=ticket_id)
                if ticket is None:
                    raise NotFoundError('ticket not found')

                if ticket.status == target:
                    detail = await self.uow.ticket_query_repo.get_detail_by_id(ticket_id=ticket_id)
                    assert detail is not None
                    return detail

                updated = ticket.transition_to(
                    target, mode=self.settings.TICKET_STATUS_TRANSITION_MODE
                )

                affected = await self.uow.ticket_command_repo.update_status(
                    ticket_id=ticket_id, expected_status=ticket.status, new_status=updated.status
                )
                if affected == 0:
                    raise ConflictError('ticket status changed concurrently')

                restored = 0
                if self.settings.CANCEL_RESTORES_CAPACITY:
                    if ticket.releases_capacity_on(target):
                        released = await self.uow.ticket_command_repo.increment_capacity(
                            event_id=ticket.event_id, quantity=ticket.quantity
                        )
                        if released:
                            restored = ticket.quantity
                        else:
                            Logger.base.warning(
                                f'⚠️ [STATUS] Event {ticket.event_id} is gone; '
                                f'capacity for ticket {ticket_id} not restored'
                            )
                    elif ticket.reclaims_capacity_on(target):
                        reclaimed = await self.uow.ticket_command_repo.decrement_capacity(
                            event_id=ticket.event_id, quantity=ticket.quantity
                        )
                        if reclaimed == 0:
                            raise InsufficientStockError(
                                event_id=ticket.event_id, requested=ticket.quantity
                            )

                await self.uow.commit()
                detail = await self.uow.ticket_query_repo.get_detail_by_id(ticket_id=ticket_id)

        metrics.record_status_transition(from_status=ticket.status.value, to_status=target.value)
        if restored:
            metrics.record_capacity_restored(event_id=ticket.event_id, quantity=restored)

        Logger.base.info(
            f'🔁 [STATUS] Ticket {ticket_id}: {ticket.status.value} -> {target.value}'
            + (f' (restored {restored} to event {ticket.event_id})' if restored else '')
        )
        assert detail is not None
        return detail
