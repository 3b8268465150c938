from abc import ABC, abstractmethod
from typing import Any, Optional

from src.service.ticketing.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository - write operations"""

    @abstractmethod
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        """
        Raises:
            ConflictError: email already registered
        """
        pass

    @abstractmethod
    async def update_fields(self, *, user_id: int, changes: dict[str, Any]) -> Optional[UserEntity]:
        """Write only the given columns; None when the user does not exist"""
        pass

    @abstractmethod
    async def soft_delete(self, *, user_id: int) -> bool:
        """False when no live user matched"""
        pass
