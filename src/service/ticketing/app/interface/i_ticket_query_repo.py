from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.value_object.monthly_sales import MonthlySalesRow
from src.service.ticketing.domain.value_object.ticket_detail import TicketDetail


class ITicketQueryRepo(ABC):
    """Ticket Query Repository - soft-deleted tickets are invisible"""

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    async def get_detail_by_id(self, *, ticket_id: int) -> Optional[TicketDetail]:
        """Ticket joined with its user and event projections in one query"""
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[TicketDetail]:
        pass

    @abstractmethod
    async def list_all(self) -> List[TicketDetail]:
        pass

    @abstractmethod
    async def monthly_sales_report(self) -> List[MonthlySalesRow]:
        """Confirmed tickets grouped by (YYYY-MM, event), ordered by month then event id"""
        pass
