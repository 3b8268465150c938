from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.delete_ticket_use_case import DeleteTicketUseCase
from src.service.ticketing.app.command.issue_ticket_use_case import IssueTicketUseCase
from src.service.ticketing.app.command.update_ticket_status_use_case import (
    UpdateTicketStatusUseCase,
)
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.ticketing.app.query.monthly_sales_report_use_case import (
    MonthlySalesReportUseCase,
)
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    RoleAuthStrategy,
    get_current_user,
    require_admin,
    require_customer_or_admin,
)
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    MonthlySalesResponse,
    TicketCreateRequest,
    TicketResponse,
    TicketStatusUpdateRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def issue_ticket(
    request: TicketCreateRequest,
    current_user: UserEntity = Depends(require_customer_or_admin),
    use_case: IssueTicketUseCase = Depends(IssueTicketUseCase.depends),
) -> TicketResponse:
    with tracer.start_as_current_span('controller.issue_ticket') as span:
        span.set_attribute('event_id', request.event_id)
        span.set_attribute('quantity', request.quantity)
        span.set_attribute('user_id', current_user.id or 0)

        detail = await use_case.issue(
            user_id=current_user.id or 0,
            event_id=request.event_id,
            quantity=request.quantity,
        )
        return TicketResponse.from_detail(detail)


@router.get('/my_ticket', response_model=List[TicketResponse])
@Logger.io
async def list_my_tickets(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_by_user(user_id=current_user.id or 0)
    return [TicketResponse.from_detail(t) for t in tickets]


@router.get('', response_model=List[TicketResponse])
@Logger.io
async def list_tickets(
    current_user: UserEntity = Depends(require_admin),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    return [TicketResponse.from_detail(t) for t in await use_case.list_all()]


@router.get('/report/monthly', response_model=List[MonthlySalesResponse])
@Logger.io
async def monthly_sales_report(
    current_user: UserEntity = Depends(require_admin),
    use_case: MonthlySalesReportUseCase = Depends(MonthlySalesReportUseCase.depends),
) -> List[MonthlySalesResponse]:
    return [MonthlySalesResponse.from_row(row) for row in await use_case.report()]


@router.get('/{ticket_id}', response_model=TicketResponse)
@Logger.io
async def get_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    detail = await use_case.get_by_id(
        ticket_id=ticket_id,
        requester_id=current_user.id or 0,
        requester_is_admin=RoleAuthStrategy.is_admin(current_user),
    )
    return TicketResponse.from_detail(detail)


@router.patch('/{ticket_id}', response_model=TicketResponse)
@Logger.io
async def update_ticket_status(
    ticket_id: int,
    request: TicketStatusUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateTicketStatusUseCase = Depends(UpdateTicketStatusUseCase.depends),
) -> TicketResponse:
    detail = await use_case.set_status(ticket_id=ticket_id, new_status=request.status)
    return TicketResponse.from_detail(detail)


@router.delete('/{ticket_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteTicketUseCase = Depends(DeleteTicketUseCase.depends),
) -> None:
    await use_case.delete(ticket_id=ticket_id)
