from datetime import datetime, timezone
from typing import Any, AsyncContextManager, Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driven_adapter.model.user_model import UserModel
from src.service.ticketing.driven_adapter.repo.user_query_repo_impl import user_model_to_entity


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
                hp=user_entity.hp,
                address=user_entity.address,
                role=user_entity.role.value,
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError('email already exist') from e
            await session.refresh(user_model)

            return user_model_to_entity(user_model)

    @Logger.io
    async def update_fields(self, *, user_id: int, changes: dict[str, Any]) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                update(UserModel)
                .where(UserModel.id == user_id, UserModel.deleted_at.is_(None))
                .values(**changes, updated_at=datetime.now(timezone.utc))
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                await session.rollback()
                return None
            await session.commit()

            refreshed = await session.execute(select(UserModel).where(UserModel.id == user_id))
            return user_model_to_entity(refreshed.scalar_one())

    @Logger.io
    async def soft_delete(self, *, user_id: int) -> bool:
        now = datetime.now(timezone.utc)
        async with self.session_factory() as session:
            result = await session.execute(
                update(UserModel)
                .where(UserModel.id == user_id, UserModel.deleted_at.is_(None))
                .values(deleted_at=now, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            return result.rowcount == 1  # type: ignore[attr-defined]
