from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.value_object.page import Page, PageRequest


class ListEventsUseCase:
    def __init__(self, *, event_query_repo: IEventQueryRepo, settings: Settings) -> None:
        self.event_query_repo = event_query_repo
        self.settings = settings

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo, settings=settings)

    def build_page_request(
        self, *, page: int | None, page_size: int | None, search: str | None
    ) -> PageRequest:
        """Missing or non-positive values fall back to defaults; page_size is capped"""
        page = page if page and page > 0 else 1
        page_size = page_size if page_size and page_size > 0 else self.settings.EVENT_PAGE_SIZE_DEFAULT
        page_size = min(page_size, self.settings.EVENT_PAGE_SIZE_MAX)
        return PageRequest(page=page, page_size=page_size, search=(search or '').strip())

    @Logger.io
    async def list_events(
        self, *, page: int | None = None, page_size: int | None = None, search: str | None = None
    ) -> Page[EventEntity]:
        page_request = self.build_page_request(page=page, page_size=page_size, search=search)
        events, total = await self.event_query_repo.list_paginated(page_request=page_request)

        Logger.base.info(
            f'📋 [LIST_EVENTS] page={page_request.page} size={page_request.page_size} '
            f'search="{page_request.search}" -> {len(events)}/{total}'
        )
        return Page(
            items=events,
            total=total,
            page=page_request.page,
            page_size=page_request.page_size,
        )
