from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    EVENT_GET,
    EVENT_UPDATE,
    TICKET_CREATE,
    TICKET_DELETE,
    TICKET_GET,
    TICKET_LIST,
    TICKET_MONTHLY_REPORT,
    TICKET_MY_TICKETS,
    TICKET_UPDATE_STATUS,
)
from test.shared.utils import assert_response_status
from test.util_constant import CUSTOMER_EMAIL


def _buy(client: TestClient, headers: dict[str, str], event_id: int, quantity: int) -> Any:
    return client.post(
        TICKET_CREATE, json={'event_id': event_id, 'quantity': quantity}, headers=headers
    )


@pytest.mark.integration
class TestIssueTicketAPI:
    def test_issue_ticket(
        self, client: TestClient, customer_headers: dict[str, str], sample_event: dict[str, Any]
    ):
        response = _buy(client, customer_headers, sample_event['id'], 3)

        assert_response_status(response, 201)
        data = response.json()
        assert data['status'] == 'waiting'
        assert data['quantity'] == 3
        assert data['unit_price'] == 10.0
        assert data['total_amount'] == 30.0
        assert data['user']['email'] == CUSTOMER_EMAIL
        assert data['event']['name'] == sample_event['name']

        event = client.get(
            EVENT_GET.format(event_id=sample_event['id']), headers=customer_headers
        ).json()
        assert event['capacity'] == 2

    def test_quantity_zero_is_validation_error(
        self, client: TestClient, customer_headers: dict[str, str], sample_event: dict[str, Any]
    ):
        response = _buy(client, customer_headers, sample_event['id'], 0)

        assert_response_status(response, 400)
        assert response.json()['errors'][0]['field'] == 'quantity'

    def test_unknown_event(self, client: TestClient, customer_headers: dict[str, str]):
        response = _buy(client, customer_headers, 9999, 1)

        assert_response_status(response, 404)
        assert response.json()['detail'] == 'event not found'

    def test_quantity_above_capacity(
        self, client: TestClient, customer_headers: dict[str, str], sample_event: dict[str, Any]
    ):
        response = _buy(client, customer_headers, sample_event['id'], 6)

        assert_response_status(response, 409)
        assert response.json()['detail'] == 'stock not enough'

    def test_second_buyer_gets_insufficient_stock(
        self,
        client: TestClient,
        customer_headers: dict[str, str],
        another_customer_headers: dict[str, str],
        sample_event: dict[str, Any],
    ):
        assert_response_status(_buy(client, customer_headers, sample_event['id'], 3), 201)

        response = _buy(client, another_customer_headers, sample_event['id'], 3)

        assert_response_status(response, 409)

    def test_anonymous_cannot_buy(self, client: TestClient, sample_event: dict[str, Any]):
        response = client.post(TICKET_CREATE, json={'event_id': sample_event['id'], 'quantity': 1})

        assert_response_status(response, 401)

    def test_event_price_change_keeps_ticket_price(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        customer_headers: dict[str, str],
        sample_event: dict[str, Any],
    ):
        ticket = _buy(client, customer_headers, sample_event['id'], 2).json()
        client.patch(
            EVENT_UPDATE.format(event_id=sample_event['id']),
            json={'price': 99.0},
            headers=admin_headers,
        )

        reread = client.get(TICKET_GET.format(ticket_id=ticket['id']), headers=customer_headers)

        assert reread.json()['unit_price'] == 10.0
        assert reread.json()['total_amount'] == 20.0


@pytest.mark.integration
class TestTicketQueriesAPI:
    def test_my_tickets_only_lists_own(
        self,
        client: TestClient,
        customer_headers: dict[str, str],
        another_customer_headers: dict[str, str],
        sample_event: dict[str, Any],
    ):
        _buy(client, customer_headers, sample_event['id'], 1)
        _buy(client, another_customer_headers, sample_event['id'], 2)

        mine = client.get(TICKET_MY_TICKETS, headers=customer_headers)

        assert_response_status(mine, 200)
        assert [t['quantity'] for t in mine.json()] == [1]

    def test_other_customer_cannot_read_ticket(
        self,
        client: TestClient,
        customer_headers: dict[str, str],
        another_customer_headers: dict[str, str],
        sample_event: dict[str, Any],
    ):
        ticket = _buy(client, customer_headers, sample_event['id'], 1).json()

        response = client.get(
            TICKET_GET.format(ticket_id=ticket['id']), headers=another_customer_headers
        )

        assert_response_status(response, 403)

    def test_admin_lists_all_tickets(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        customer_headers: dict[str, str],
        another_customer_headers: dict[str, str],
        sample_event: dict[str, Any],
    ):
        _buy(client, customer_headers, sample_event['id'], 1)
        _buy(client, another_customer_headers, sample_event['id'], 1)

        response = client.get(TICKET_LIST, headers=admin_headers)

        assert_response_status(response, 200)
        assert len(response.json()) == 2

    def test_customer_cannot_list_all_tickets(
        self, client: TestClient, customer_headers: dict[str, str]
    ):
        assert_response_status(client.get(TICKET_LIST, headers=customer_headers), 403)

    def test_get_unknown_ticket(self, client: TestClient, admin_headers: dict[str, str]):
        response = client.get(TICKET_GET.format(ticket_id=9999), headers=admin_headers)

        assert_response_status(response, 404)


@pytest.mark.integration
class TestTicketAdministrationAPI:
    @pytest.fixture
    def ticket(
        self, client: TestClient, customer_headers: dict[str, str], sample_event: dict[str, Any]
    ) -> dict[str, Any]:
        response = _buy(client, customer_headers, sample_event['id'], 3)
        assert_response_status(response, 201)
        return response.json()

    def test_confirm_ticket(
        self, client: TestClient, admin_headers: dict[str, str], ticket: dict[str, Any]
    ):
        response = client.patch(
            TICKET_UPDATE_STATUS.format(ticket_id=ticket['id']),
            json={'status': 'confirmed'},
            headers=admin_headers,
        )

        assert_response_status(response, 200)
        assert response.json()['status'] == 'confirmed'

    def test_terminal_status_cannot_change(
        self, client: TestClient, admin_headers: dict[str, str], ticket: dict[str, Any]
    ):
        url = TICKET_UPDATE_STATUS.format(ticket_id=ticket['id'])
        client.patch(url, json={'status': 'canceled'}, headers=admin_headers)

        response = client.patch(url, json={'status': 'confirmed'}, headers=admin_headers)

        assert_response_status(response, 400)

    def test_unknown_status(
        self, client: TestClient, admin_headers: dict[str, str], ticket: dict[str, Any]
    ):
        response = client.patch(
            TICKET_UPDATE_STATUS.format(ticket_id=ticket['id']),
            json={'status': 'refunded'},
            headers=admin_headers,
        )

        assert_response_status(response, 400)
        assert response.json()['errors'][0]['field'] == 'status'

    def test_customer_cannot_change_status(
        self, client: TestClient, customer_headers: dict[str, str], ticket: dict[str, Any]
    ):
        response = client.patch(
            TICKET_UPDATE_STATUS.format(ticket_id=ticket['id']),
            json={'status': 'confirmed'},
            headers=customer_headers,
        )

        assert_response_status(response, 403)

    def test_delete_ticket(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        customer_headers: dict[str, str],
        sample_event: dict[str, Any],
        ticket: dict[str, Any],
    ):
        response = client.delete(TICKET_DELETE.format(ticket_id=ticket['id']), headers=admin_headers)

        assert_response_status(response, 204)
        assert client.get(TICKET_MY_TICKETS, headers=customer_headers).json() == []
        event = client.get(
            EVENT_GET.format(event_id=sample_event['id']), headers=customer_headers
        ).json()
        assert event['capacity'] == 2

        again = client.delete(TICKET_DELETE.format(ticket_id=ticket['id']), headers=admin_headers)
        assert_response_status(again, 404)

    def test_monthly_report(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        customer_headers: dict[str, str],
        sample_event: dict[str, Any],
        ticket: dict[str, Any],
    ):
        _buy(client, customer_headers, sample_event['id'], 1)
        client.patch(
            TICKET_UPDATE_STATUS.format(ticket_id=ticket['id']),
            json={'status': 'confirmed'},
            headers=admin_headers,
        )

        response = client.get(TICKET_MONTHLY_REPORT, headers=admin_headers)

        assert_response_status(response, 200)
        rows = response.json()
        assert len(rows) == 1
        assert rows[0]['event_id'] == sample_event['id']
        assert rows[0]['event_name'] == sample_event['name']
        assert rows[0]['total_qty'] == 3
        assert rows[0]['total_sales'] == 30.0

    def test_customer_cannot_read_report(
        self, client: TestClient, customer_headers: dict[str, str]
    ):
        assert_response_status(client.get(TICKET_MONTHLY_REPORT, headers=customer_headers), 403)
