from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.monthly_sales import MonthlySalesRow
from src.service.ticketing.domain.value_object.ticket_detail import TicketDetail


class TicketCreateRequest(BaseModel):
    event_id: int
    quantity: int

    model_config = ConfigDict(json_schema_extra={'example': {'event_id': 1, 'quantity': 2}})


class TicketStatusUpdateRequest(BaseModel):
    status: str

    model_config = ConfigDict(json_schema_extra={'example': {'status': 'confirmed'}})


class TicketUserResponse(BaseModel):
    id: int
    name: str
    email: str
    hp: str
    address: str


class TicketEventResponse(BaseModel):
    id: int
    name: str
    description: str


class TicketResponse(BaseModel):
    id: int
    user_id: int
    event_id: int
    quantity: int
    unit_price: float
    total_amount: float
    status: TicketStatus
    user: TicketUserResponse
    event: TicketEventResponse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'user_id': 2,
                'event_id': 1,
                'quantity': 3,
                'unit_price': 10.0,
                'total_amount': 30.0,
                'status': 'waiting',
                'user': {
                    'id': 2,
                    'name': 'John Doe',
                    'email': 'user@example.com',
                    'hp': '0912345678',
                    'address': 'Taipei',
                },
                'event': {'id': 1, 'name': 'Concert Event', 'description': 'Live music'},
                'created_at': '2025-01-10T10:30:00',
                'updated_at': '2025-01-10T10:30:00',
            }
        }
    )

    @classmethod
    def from_detail(cls, detail: TicketDetail) -> 'TicketResponse':
        return cls(
            id=detail.id,
            user_id=detail.user_id,
            event_id=detail.event_id,
            quantity=detail.quantity,
            unit_price=detail.unit_price,
            total_amount=detail.total_amount,
            status=detail.status,
            user=TicketUserResponse(
                id=detail.user.id,
                name=detail.user.name,
                email=detail.user.email,
                hp=detail.user.hp,
                address=detail.user.address,
            ),
            event=TicketEventResponse(
                id=detail.event.id,
                name=detail.event.name,
                description=detail.event.description,
            ),
            created_at=detail.created_at,
            updated_at=detail.updated_at,
        )


class MonthlySalesResponse(BaseModel):
    month: str
    event_id: int
    event_name: str
    event_description: str
    total_qty: int
    total_sales: float

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'month': '2025-01',
                'event_id': 1,
                'event_name': 'Concert Event',
                'event_description': 'Live music',
                'total_qty': 12,
                'total_sales': 120.0,
            }
        }
    )

    @classmethod
    def from_row(cls, row: MonthlySalesRow) -> 'MonthlySalesResponse':
        return cls(
            month=row.month,
            event_id=row.event_id,
            event_name=row.event_name,
            event_description=row.event_description,
            total_qty=row.total_qty,
            total_sales=row.total_sales,
        )
