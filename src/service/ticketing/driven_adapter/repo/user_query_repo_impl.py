from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from src.service.ticketing.driven_adapter.model.user_model import UserModel


def user_model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        name=user_model.name,
        hashed_password=user_model.hashed_password,
        hp=user_model.hp,
        address=user_model.address,
        role=UserRole(user_model.role),
        created_at=user_model.created_at,
        updated_at=user_model.updated_at,
    )


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email, UserModel.deleted_at.is_(None))
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return user_model_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.id == user_id, UserModel.deleted_at.is_(None))
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return user_model_to_entity(user_model)

    @Logger.io
    async def exists_by_email(self, *, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.deleted_at.is_(None)).order_by(UserModel.id)
            )
            return [user_model_to_entity(m) for m in result.scalars().all()]
