from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User Query Repository - read operations, soft-deleted users are invisible"""

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        """Includes the password hash, for authentication"""
        pass

    @abstractmethod
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, *, email: str) -> bool:
        pass

    @abstractmethod
    async def list_all(self) -> List[UserEntity]:
        pass
