from datetime import datetime
from typing import Any, Optional

import attrs

from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.validators import (
    raise_if_invalid,
    validate_event_changes,
    validate_new_event,
)


UPDATABLE_FIELDS = ('name', 'description', 'price', 'capacity', 'status')


@attrs.define
class EventEntity:
    name: str
    description: str
    price: float
    capacity: int
    status: EventStatus = EventStatus.ACTIVE
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, name: str, description: str, price: float, capacity: int) -> 'EventEntity':
        raise_if_invalid(
            validate_new_event(name=name, description=description, price=price, capacity=capacity)
        )
        return cls(
            name=name.strip(),
            description=description.strip(),
            price=float(price),
            capacity=capacity,
            status=EventStatus.ACTIVE,
        )

    @staticmethod
    def clean_changes(**changes: Any) -> dict[str, Any]:
        """
        Validate a partial update and return only the fields to write.

        Unknown keys and None values are dropped; capacity is an absolute value.
        """
        provided = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        raise_if_invalid(validate_event_changes(provided))

        if 'name' in provided:
            provided['name'] = provided['name'].strip()
        if 'description' in provided:
            provided['description'] = provided['description'].strip()
        if 'price' in provided:
            provided['price'] = float(provided['price'])
        if 'status' in provided:
            provided['status'] = EventStatus(provided['status'])
        return provided
