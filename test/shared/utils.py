from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import EVENT_CREATE, USER_CREATE, USER_LOGIN
from test.util_constant import DEFAULT_ADDRESS, DEFAULT_HP


def extract_table_data(step) -> Dict[str, Any]:
    rows = step.data_table.rows
    headers = [cell.value for cell in rows[0].cells]
    values = [cell.value for cell in rows[1].cells]
    return dict(zip(headers, values, strict=True))


def extract_single_value(step, row_index: int = 0, col_index: int = 0) -> str:
    rows = step.data_table.rows
    return rows[row_index].cells[col_index].value


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient,
    email: str,
    password: str,
    name: str,
    hp: str = DEFAULT_HP,
    address: str = DEFAULT_ADDRESS,
) -> Dict[str, Any]:
    user_data = {
        'email': email,
        'password': password,
        'name': name,
        'hp': hp,
        'address': address,
    }
    response = client.post(USER_CREATE, json=user_data)
    assert_response_status(response, 201, f'Failed to create user {email}: {response.text}')
    return response.json()


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Helper function to login a user and set cookies."""
    login_response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    return login_response


def auth_headers(client: TestClient, email: str, password: str) -> Dict[str, str]:
    token = login_user(client, email, password).json()['access_token']
    client.cookies.clear()
    return {'Authorization': f'Bearer {token}'}


def create_event(
    client: TestClient,
    headers: Dict[str, str],
    *,
    name: str,
    price: float,
    capacity: int,
    description: str = 'Live music',
) -> Dict[str, Any]:
    event_data = {
        'name': name,
        'description': description,
        'price': price,
        'capacity': capacity,
    }
    response = client.post(EVENT_CREATE, json=event_data, headers=headers)
    assert_response_status(response, 201, 'Failed to create event')
    return response.json()
