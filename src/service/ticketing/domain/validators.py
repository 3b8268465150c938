"""
Explicit per-field validation

Each validate_* function inspects raw input and returns every problem it
finds as a FieldError; raise_if_invalid turns a non-empty list into one
ValidationError. Nothing here touches storage.
"""

from typing import Any, Iterable, List, Optional

from email_validator import EmailNotValidError, validate_email

from src.platform.exception.exceptions import FieldError, ValidationError
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


EVENT_NAME_MAX = 100
EVENT_DESCRIPTION_MAX = 225
USER_NAME_MAX = 100
USER_EMAIL_MAX = 100
USER_PASSWORD_MAX = 255
USER_HP_MAX = 20
USER_ADDRESS_MAX = 255


def raise_if_invalid(errors: Iterable[FieldError]) -> None:
    errors = list(errors)
    if errors:
        raise ValidationError(errors)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_text(
    field: str, value: Any, *, max_length: int, required: bool = True
) -> Optional[FieldError]:
    if value is None:
        return FieldError(field, 'is required') if required else None
    if not isinstance(value, str) or not value.strip():
        return FieldError(field, 'must be a non-empty string')
    if len(value) > max_length:
        return FieldError(field, f'must be at most {max_length} characters')
    return None


def validate_quantity(quantity: Any) -> List[FieldError]:
    if not _is_int(quantity) or quantity <= 0:
        return [FieldError('quantity', 'must be a positive integer')]
    return []


def validate_ticket_request(*, user_id: Any, event_id: Any, quantity: Any) -> List[FieldError]:
    errors: List[FieldError] = []
    if not _is_int(user_id) or user_id <= 0:
        errors.append(FieldError('user_id', 'is required'))
    if not _is_int(event_id) or event_id <= 0:
        errors.append(FieldError('event_id', 'is required'))
    errors.extend(validate_quantity(quantity))
    return errors


def validate_ticket_status(status: Any) -> List[FieldError]:
    if status not in {s.value for s in TicketStatus}:
        allowed = ', '.join(s.value for s in TicketStatus)
        return [FieldError('status', f'must be one of: {allowed}')]
    return []


def validate_price(price: Any) -> Optional[FieldError]:
    if not _is_number(price) or price < 0:
        return FieldError('price', 'must be a non-negative number')
    return None


def validate_capacity(capacity: Any, *, minimum: int) -> Optional[FieldError]:
    if not _is_int(capacity) or capacity < minimum:
        return FieldError('capacity', f'must be an integer >= {minimum}')
    return None


def validate_event_status(status: Any) -> Optional[FieldError]:
    if status not in {s.value for s in EventStatus}:
        allowed = ', '.join(s.value for s in EventStatus)
        return FieldError('status', f'must be one of: {allowed}')
    return None


def validate_new_event(
    *, name: Any, description: Any, price: Any, capacity: Any
) -> List[FieldError]:
    checks = [
        check_text('name', name, max_length=EVENT_NAME_MAX),
        check_text('description', description, max_length=EVENT_DESCRIPTION_MAX),
        validate_price(price),
        validate_capacity(capacity, minimum=1),
    ]
    return [error for error in checks if error]


def validate_event_changes(changes: dict[str, Any]) -> List[FieldError]:
    """Only the keys present in changes are checked; None means 'leave unchanged'."""
    errors: List[Optional[FieldError]] = []
    if changes.get('name') is not None:
        errors.append(check_text('name', changes['name'], max_length=EVENT_NAME_MAX))
    if changes.get('description') is not None:
        errors.append(
            check_text('description', changes['description'], max_length=EVENT_DESCRIPTION_MAX)
        )
    if changes.get('price') is not None:
        errors.append(validate_price(changes['price']))
    if changes.get('capacity') is not None:
        errors.append(validate_capacity(changes['capacity'], minimum=0))
    if changes.get('status') is not None:
        errors.append(validate_event_status(changes['status']))
    return [error for error in errors if error]


def validate_email_address(email: Any) -> Optional[FieldError]:
    if not isinstance(email, str) or not email.strip():
        return FieldError('email', 'is required')
    if len(email) > USER_EMAIL_MAX:
        return FieldError('email', f'must be at most {USER_EMAIL_MAX} characters')
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return FieldError('email', 'must be a valid email address')
    return None


def validate_hp(hp: Any, *, required: bool = True) -> Optional[FieldError]:
    if hp is None and not required:
        return None
    if not isinstance(hp, str) or not hp.strip():
        return FieldError('hp', 'is required')
    if len(hp) > USER_HP_MAX or not hp.strip().lstrip('+').isdigit():
        return FieldError('hp', f'must be numeric and at most {USER_HP_MAX} characters')
    return None


def validate_registration(
    *, name: Any, email: Any, password: Any, hp: Any, address: Any
) -> List[FieldError]:
    checks = [
        check_text('name', name, max_length=USER_NAME_MAX),
        validate_email_address(email),
        check_text('password', password, max_length=USER_PASSWORD_MAX),
        validate_hp(hp),
        check_text('address', address, max_length=USER_ADDRESS_MAX),
    ]
    return [error for error in checks if error]


def validate_profile_changes(changes: dict[str, Any]) -> List[FieldError]:
    errors: List[Optional[FieldError]] = []
    if changes.get('name') is not None:
        errors.append(check_text('name', changes['name'], max_length=USER_NAME_MAX))
    if changes.get('password') is not None:
        errors.append(check_text('password', changes['password'], max_length=USER_PASSWORD_MAX))
    if changes.get('hp') is not None:
        errors.append(validate_hp(changes['hp']))
    if changes.get('address') is not None:
        errors.append(check_text('address', changes['address'], max_length=USER_ADDRESS_MAX))
    return [error for error in errors if error]
