from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import EventNotFoundError, ValidationError
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.value_object.page import PageRequest
from test.service.ticketing.unit.helpers import make_settings


@pytest.mark.unit
class TestCreateEventUseCase:
    async def test_create_passes_validated_entity_to_repo(self):
        repo = AsyncMock()
        repo.create = AsyncMock(side_effect=lambda event: attrs.evolve(event, id=1))
        use_case = CreateEventUseCase(event_command_repo=repo)

        created = await use_case.create(
            name=' Jazz Night ', description='Live music', price=10, capacity=5
        )

        assert created.id == 1
        assert created.name == 'Jazz Night'
        assert created.status == EventStatus.ACTIVE
        repo.create.assert_awaited_once()

    async def test_invalid_event_is_not_persisted(self):
        repo = AsyncMock()
        use_case = CreateEventUseCase(event_command_repo=repo)

        with pytest.raises(ValidationError):
            await use_case.create(name='Jazz', description='Live', price=10, capacity=0)

        repo.create.assert_not_awaited()


@pytest.mark.unit
class TestUpdateEventUseCase:
    @pytest.fixture
    def repos(self, sample_event: EventEntity) -> tuple[AsyncMock, AsyncMock]:
        command_repo = AsyncMock()
        query_repo = AsyncMock()
        query_repo.get_by_id = AsyncMock(return_value=sample_event)
        return command_repo, query_repo

    async def test_update_forwards_only_changed_fields(self, repos, sample_event: EventEntity):
        command_repo, query_repo = repos
        command_repo.update_fields = AsyncMock(return_value=sample_event)
        use_case = UpdateEventUseCase(event_command_repo=command_repo, event_query_repo=query_repo)

        await use_case.update(event_id=1, price=12, name=None, capacity=20)

        command_repo.update_fields.assert_awaited_once_with(
            event_id=1, changes={'price': 12.0, 'capacity': 20}
        )

    async def test_empty_update_returns_current_event(self, repos, sample_event: EventEntity):
        command_repo, query_repo = repos
        use_case = UpdateEventUseCase(event_command_repo=command_repo, event_query_repo=query_repo)

        result = await use_case.update(event_id=1, name=None)

        assert result is sample_event
        command_repo.update_fields.assert_not_awaited()

    async def test_update_missing_event(self, repos):
        command_repo, query_repo = repos
        command_repo.update_fields = AsyncMock(return_value=None)
        use_case = UpdateEventUseCase(event_command_repo=command_repo, event_query_repo=query_repo)

        with pytest.raises(EventNotFoundError):
            await use_case.update(event_id=9, description='Moved')


@pytest.mark.unit
class TestEventQueriesAndDelete:
    async def test_get_missing_event(self):
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(EventNotFoundError):
            await GetEventUseCase(event_query_repo=repo).get_by_id(event_id=3)

    async def test_delete_missing_event(self):
        repo = AsyncMock()
        repo.soft_delete = AsyncMock(return_value=False)

        with pytest.raises(EventNotFoundError):
            await DeleteEventUseCase(event_command_repo=repo).delete(event_id=3)

    @pytest.mark.parametrize(
        'page,page_size,expected',
        [
            (None, None, (1, 10)),
            (0, -5, (1, 10)),
            (3, 20, (3, 20)),
            (2, 1000, (2, 100)),
        ],
    )
    def test_page_request_defaults_and_cap(self, page, page_size, expected):
        use_case = ListEventsUseCase(event_query_repo=AsyncMock(), settings=make_settings())

        page_request = use_case.build_page_request(page=page, page_size=page_size, search=' jazz ')

        assert (page_request.page, page_request.page_size) == expected
        assert page_request.search == 'jazz'

    async def test_list_events_builds_page(self, sample_event: EventEntity):
        repo = AsyncMock()
        repo.list_paginated = AsyncMock(return_value=([sample_event], 11))
        use_case = ListEventsUseCase(event_query_repo=repo, settings=make_settings())

        page = await use_case.list_events(page=2, page_size=5)

        repo.list_paginated.assert_awaited_once_with(
            page_request=PageRequest(page=2, page_size=5, search='')
        )
        assert page.items == [sample_event]
        assert page.total == 11
        assert page.total_pages == 3
