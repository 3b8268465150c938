from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo


class DeleteUserUseCase:
    def __init__(self, user_command_repo: IUserCommandRepo) -> None:
        self.user_command_repo = user_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo)

    @Logger.io
    async def delete(self, *, user_id: int, acting_user_id: int) -> None:
        if user_id == acting_user_id:
            raise DomainError('cannot delete yourself')
        if not await self.user_command_repo.soft_delete(user_id=user_id):
            raise NotFoundError('user not found')
        Logger.base.info(f'🗑️ [USER] User {user_id} deleted by {acting_user_id}')
