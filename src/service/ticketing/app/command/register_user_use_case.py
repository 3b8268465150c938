from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole, normalize_email
from src.service.ticketing.domain.validators import raise_if_invalid, validate_registration


class RegisterUserUseCase:
    """Public sign-up always yields a customer; admins are seeded out of band"""

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
    async def register(
        self,
        *,
        name: str,
        email: str,
        password: str,
        hp: str,
        address: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> UserEntity:
        raise_if_invalid(
            validate_registration(name=name, email=email, password=password, hp=hp, address=address)
        )
        email = normalize_email(email)

        if await self.user_query_repo.exists_by_email(email=email):
            raise ConflictError('email already exist')

        user_entity = UserEntity(
            email=email,
            name=name.strip(),
            hp=hp.strip(),
            address=address.strip(),
            role=role,
        )
        user_entity.set_password(password, self.password_hasher)

        created = await self.user_command_repo.create(user_entity=user_entity)
        Logger.base.info(f'👤 [USER] Registered user {created.id} as {created.role.value}')
        return created
