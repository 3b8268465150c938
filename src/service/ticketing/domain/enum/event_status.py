from enum import StrEnum


class EventStatus(StrEnum):
    """Informational lifecycle flag; issuance does not look at it"""

    ACTIVE = 'active'
    IN_PROGRESS = 'in_progress'
    FINISHED = 'finished'
