"""
ORM models for users, events and tickets

Importing this package registers every table on Base.metadata, which alembic
and the test schema setup both read.
"""

from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel

__all__ = [
    'EventModel',
    'TicketModel',
    'UserModel',
]
