# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_REFRESH = f'{USER_BASE}/refresh'
USER_ME = USER_BASE
USER_LIST = f'{USER_BASE}/all'
USER_DELETE = f'{USER_BASE}/{{user_id}}'

# Event routes
EVENT_BASE = f'{API_BASE}/event'
EVENT_CREATE = EVENT_BASE
EVENT_LIST = EVENT_BASE
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_DELETE = f'{EVENT_BASE}/{{event_id}}'

# Ticket routes
TICKET_BASE = f'{API_BASE}/ticket'
TICKET_CREATE = TICKET_BASE
TICKET_LIST = TICKET_BASE
TICKET_MY_TICKETS = f'{TICKET_BASE}/my_ticket'
TICKET_MONTHLY_REPORT = f'{TICKET_BASE}/report/monthly'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_UPDATE_STATUS = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_DELETE = f'{TICKET_BASE}/{{ticket_id}}'
