from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventPageResponse,
    EventResponse,
    EventUpdateRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=EventResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    with tracer.start_as_current_span('controller.create_event') as span:
        span.set_attribute('admin_id', current_user.id or 0)
        event = await use_case.create(
            name=request.name,
            description=request.description,
            price=request.price,
            capacity=request.capacity,
        )
        return EventResponse.from_entity(event)


@router.get('', response_model=EventPageResponse)
@Logger.io
async def list_events(
    page: int = 1,
    page_size: int | None = None,
    search: str = '',
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventPageResponse:
    result = await use_case.list_events(page=page, page_size=page_size, search=search)
    return EventPageResponse(
        current_page=result.page,
        total_page=result.total_pages,
        total_items=result.total,
        data=[EventResponse.from_entity(e) for e in result.items],
    )


@router.get('/{event_id}', response_model=EventResponse)
@Logger.io
async def get_event(
    event_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_by_id(event_id=event_id)
    return EventResponse.from_entity(event)


@router.patch('/{event_id}', response_model=EventResponse)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.update(event_id=event_id, **request.model_dump(exclude_none=True))
    return EventResponse.from_entity(event)


@router.delete('/{event_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_event(
    event_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> None:
    await use_case.delete(event_id=event_id)
