"""
Unit tests for IssueTicketUseCase

測試重點：
1. 成功路徑：insert + guarded decrement 在同一個 unit of work 內 commit
2. Fail Fast：quantity 不合法、event 不存在時不碰任何寫入
3. 容量不足：讀到的 capacity 不夠直接拒絕；寫入時 guard 失敗則 rollback
"""

from unittest.mock import AsyncMock, patch

import pytest

from src.platform.exception.exceptions import (
    EventNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from src.service.ticketing.app.command.issue_ticket_use_case import IssueTicketUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from test.service.ticketing.unit.helpers import FakeUnitOfWork, make_detail


METRICS_PATH = 'src.service.ticketing.app.command.issue_ticket_use_case.metrics'


@pytest.mark.unit
class TestIssueTicketUseCase:
    @pytest.fixture
    def use_case(self, fake_uow: FakeUnitOfWork) -> IssueTicketUseCase:
        return IssueTicketUseCase(uow=fake_uow)

    @pytest.fixture
    def wired_uow(self, fake_uow: FakeUnitOfWork, sample_event: EventEntity) -> FakeUnitOfWork:
        async def _insert(*, ticket: TicketEntity) -> TicketEntity:
            ticket.id = 42
            return ticket

        fake_uow.event_query_repo.get_by_id = AsyncMock(return_value=sample_event)
        fake_uow.ticket_command_repo.insert_ticket = AsyncMock(side_effect=_insert)
        fake_uow.ticket_command_repo.decrement_capacity = AsyncMock(return_value=1)
        return fake_uow

    @patch(METRICS_PATH)
    async def test_issue_ticket_success(
        self, mock_metrics, use_case: IssueTicketUseCase, wired_uow: FakeUnitOfWork
    ):
        """
        Given: event with capacity 5 at price 10.0
        When: a customer buys 3
        Then: ticket is inserted, capacity decremented by 3 and the unit committed
        """
        # Arrange
        inserted: list[TicketEntity] = []

        async def _insert(*, ticket: TicketEntity) -> TicketEntity:
            ticket.id = 42
            inserted.append(ticket)
            return ticket

        wired_uow.ticket_command_repo.insert_ticket = AsyncMock(side_effect=_insert)
        wired_uow.ticket_query_repo.get_detail_by_id = AsyncMock(
            side_effect=lambda ticket_id: make_detail(inserted[0])
        )

        # Act
        detail = await use_case.issue(user_id=7, event_id=1, quantity=3)

        # Assert
        assert detail.id == 42
        assert detail.unit_price == 10.0
        assert detail.total_amount == 30.0
        wired_uow.ticket_command_repo.decrement_capacity.assert_awaited_once_with(
            event_id=1, quantity=3
        )
        wired_uow.ticket_query_repo.get_detail_by_id.assert_awaited_once_with(ticket_id=42)
        assert wired_uow.committed is True
        assert mock_metrics.record_ticket_issue.call_args.kwargs['result'] == 'success'
        assert mock_metrics.record_ticket_issue.call_args.kwargs['quantity'] == 3

    @patch(METRICS_PATH)
    @pytest.mark.parametrize('quantity', [0, -2])
    async def test_invalid_quantity_never_touches_storage(
        self, mock_metrics, quantity, use_case: IssueTicketUseCase, fake_uow: FakeUnitOfWork
    ):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.issue(user_id=7, event_id=1, quantity=quantity)

        assert exc_info.value.errors[0].field == 'quantity'
        fake_uow.event_query_repo.get_by_id.assert_not_awaited()
        fake_uow.ticket_command_repo.insert_ticket.assert_not_awaited()
        assert mock_metrics.record_ticket_issue.call_args.kwargs['result'] == 'invalid'

    @patch(METRICS_PATH)
    async def test_missing_event_raises_event_not_found(
        self, mock_metrics, use_case: IssueTicketUseCase, fake_uow: FakeUnitOfWork
    ):
        fake_uow.event_query_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(EventNotFoundError) as exc_info:
            await use_case.issue(user_id=7, event_id=999, quantity=1)

        assert exc_info.value.event_id == 999
        assert exc_info.value.status_code == 404
        fake_uow.ticket_command_repo.insert_ticket.assert_not_awaited()
        assert fake_uow.committed is False
        assert mock_metrics.record_ticket_issue.call_args.kwargs['result'] == 'not_found'

    @patch(METRICS_PATH)
    async def test_quantity_above_capacity_is_rejected_before_insert(
        self, mock_metrics, use_case: IssueTicketUseCase, wired_uow: FakeUnitOfWork
    ):
        with pytest.raises(InsufficientStockError) as exc_info:
            await use_case.issue(user_id=7, event_id=1, quantity=6)

        assert exc_info.value.lost_race is False
        assert exc_info.value.status_code == 409
        wired_uow.ticket_command_repo.insert_ticket.assert_not_awaited()
        wired_uow.ticket_command_repo.decrement_capacity.assert_not_awaited()
        assert mock_metrics.record_ticket_issue.call_args.kwargs['result'] == 'insufficient_stock'

    @patch(METRICS_PATH)
    async def test_lost_race_at_guarded_write_rolls_back(
        self, mock_metrics, use_case: IssueTicketUseCase, wired_uow: FakeUnitOfWork
    ):
        """
        Given: the event read shows enough capacity
        When: the guarded decrement matches no row (another buyer got there first)
        Then: InsufficientStockError, no commit, the inserted ticket is rolled back
        """
        wired_uow.ticket_command_repo.decrement_capacity = AsyncMock(return_value=0)

        with pytest.raises(InsufficientStockError) as exc_info:
            await use_case.issue(user_id=7, event_id=1, quantity=3)

        assert exc_info.value.lost_race is True
        wired_uow.ticket_command_repo.insert_ticket.assert_awaited_once()
        assert wired_uow.committed is False
        assert wired_uow.rolled_back is True
        wired_uow.ticket_query_repo.get_detail_by_id.assert_not_awaited()
        assert mock_metrics.record_ticket_issue.call_args.kwargs['result'] == 'quantity_conflict'

    @patch(METRICS_PATH)
    async def test_exact_remaining_capacity_can_be_bought(
        self, mock_metrics, use_case: IssueTicketUseCase, wired_uow: FakeUnitOfWork
    ):
        inserted: list[TicketEntity] = []

        async def _insert(*, ticket: TicketEntity) -> TicketEntity:
            ticket.id = 43
            inserted.append(ticket)
            return ticket

        wired_uow.ticket_command_repo.insert_ticket = AsyncMock(side_effect=_insert)
        wired_uow.ticket_query_repo.get_detail_by_id = AsyncMock(
            side_effect=lambda ticket_id: make_detail(inserted[0])
        )

        detail = await use_case.issue(user_id=7, event_id=1, quantity=5)

        assert detail.quantity == 5
        assert detail.total_amount == 50.0
        assert wired_uow.committed is True
