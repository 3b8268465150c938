"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.monthly_sales import MonthlySalesRow
from src.service.ticketing.domain.value_object.page import Page, PageRequest
from src.service.ticketing.domain.value_object.ticket_detail import (
    EventSummary,
    TicketDetail,
    UserSummary,
)

__all__ = [
    'EventSummary',
    'MonthlySalesRow',
    'Page',
    'PageRequest',
    'TicketDetail',
    'UserSummary',
]
