from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


class EventCreateRequest(BaseModel):
    name: str
    description: str
    price: float
    capacity: int

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Concert Event',
                'description': 'Amazing live music performance',
                'price': 1500.0,
                'capacity': 500,
            }
        }
    )


class EventUpdateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    capacity: Optional[int] = None
    status: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'price': 1800.0, 'capacity': 450, 'status': 'in_progress'}}
    )


class EventResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    capacity: int
    status: EventStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Concert Event',
                'description': 'Amazing live music performance',
                'price': 1500.0,
                'capacity': 500,
                'status': 'active',
                'created_at': '2025-01-10T10:30:00',
                'updated_at': '2025-01-10T10:30:00',
            }
        }
    )

    @classmethod
    def from_entity(cls, event: EventEntity) -> 'EventResponse':
        return cls(
            id=event.id or 0,
            name=event.name,
            description=event.description,
            price=event.price,
            capacity=event.capacity,
            status=event.status,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventPageResponse(BaseModel):
    current_page: int
    total_page: int
    total_items: int
    data: List[EventResponse]
