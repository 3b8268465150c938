from enum import StrEnum


class TicketStatus(StrEnum):
    WAITING = 'waiting'
    CONFIRMED = 'confirmed'
    CANCELED = 'canceled'
