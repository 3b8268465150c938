"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    create_event_use_case,
    delete_event_use_case,
    delete_ticket_use_case,
    delete_user_use_case,
    issue_ticket_use_case,
    register_user_use_case,
    update_event_use_case,
    update_ticket_status_use_case,
    update_user_profile_use_case,
)
from src.service.ticketing.app.query import (
    get_event_use_case,
    get_ticket_use_case,
    list_events_use_case,
    list_tickets_use_case,
    monthly_sales_report_use_case,
    user_query_use_case,
)
from src.service.ticketing.driving_adapter.http_controller import user_controller
from src.service.ticketing.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    issue_ticket_use_case,
    update_ticket_status_use_case,
    delete_ticket_use_case,
    create_event_use_case,
    update_event_use_case,
    delete_event_use_case,
    register_user_use_case,
    update_user_profile_use_case,
    delete_user_use_case,
    get_event_use_case,
    list_events_use_case,
    get_ticket_use_case,
    list_tickets_use_case,
    monthly_sales_report_use_case,
    user_query_use_case,
    user_controller,
    role_auth,
]
