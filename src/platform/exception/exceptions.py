from typing import List

import attrs


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@attrs.frozen
class FieldError:
    field: str
    message: str


class ValidationError(CustomBaseError):
    """Input rejected before any storage access; carries one entry per offending field"""

    def __init__(self, errors: List[FieldError], message: str = 'validation failed') -> None:
        self.errors = list(errors)
        super().__init__(message, 400)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__('event not found')


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class InsufficientStockError(ConflictError):
    """Requested quantity exceeds remaining capacity, at read time or at the guarded write"""

    def __init__(
        self,
        *,
        event_id: int,
        requested: int,
        lost_race: bool = False,
        message: str = 'stock not enough',
    ) -> None:
        self.event_id = event_id
        self.requested = requested
        self.lost_race = lost_race
        super().__init__(message)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)
