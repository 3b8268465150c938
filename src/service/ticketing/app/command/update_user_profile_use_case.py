from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.validators import raise_if_invalid, validate_profile_changes


class UpdateUserProfileUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def update(
        self,
        *,
        user_id: int,
        name: Optional[str] = None,
        password: Optional[str] = None,
        hp: Optional[str] = None,
        address: Optional[str] = None,
    ) -> UserEntity:
        """Only the given fields change; email and role are not editable here"""
        raw = {'name': name, 'password': password, 'hp': hp, 'address': address}
        raise_if_invalid(validate_profile_changes(raw))

        changes: dict[str, Any] = {
            k: v.strip() for k, v in raw.items() if v is not None and k != 'password'
        }
        if password is not None:
            changes['hashed_password'] = self.password_hasher.hash_password(
                plain_password=SecretStr(password)
            )

        if not changes:
            user = await self.user_query_repo.get_by_id(user_id=user_id)
        else:
            user = await self.user_command_repo.update_fields(user_id=user_id, changes=changes)
        if user is None:
            raise NotFoundError('user not found')

        Logger.base.info(f'✏️ [USER] Updated user {user_id}: {sorted(changes)}')
        return user
