from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.delete_user_use_case import DeleteUserUseCase
from src.service.ticketing.app.command.register_user_use_case import RegisterUserUseCase
from src.service.ticketing.app.command.update_user_profile_use_case import (
    UpdateUserProfileUseCase,
)
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.app.query.user_query_use_case import UserQueryUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    REFRESH_TOKEN,
    JwtAuth,
)
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    UpdateUserRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.register(
        name=request.name,
        email=request.email,
        password=request.password.get_secret_value(),
        hp=request.hp,
        address=request.address,
        role=UserRole.CUSTOMER,
    )
    return UserResponse.from_entity(user_entity)


@router.post('/login', response_model=LoginResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        password_hasher=password_hasher,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    access_token = jwt_auth.create_access_token(user_entity)
    refresh_token = jwt_auth.create_refresh_token(user_entity)

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=access_token,
        max_age=jwt_auth.access_token_expires_in,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )

    return LoginResponse(
        name=user_entity.name,
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=jwt_auth.access_token_expires_in,
    )


@router.post('/refresh', response_model=RefreshResponse)
@Logger.io
@inject
async def refresh(
    request: RefreshRequest,
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> RefreshResponse:
    payload = jwt_auth.decode_token(request.refresh_token, expected_type=REFRESH_TOKEN)
    user_entity = jwt_auth.user_from_payload(payload)
    return RefreshResponse(
        access_token=jwt_auth.create_access_token(user_entity),
        expires_in=jwt_auth.access_token_expires_in,
    )


@router.get('', response_model=UserResponse)
@Logger.io
async def get_me(
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.get_by_id(user_id=current_user.id or 0)
    return UserResponse.from_entity(user_entity)


@router.patch('', response_model=UserResponse)
@Logger.io
async def update_me(
    request: UpdateUserRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateUserProfileUseCase = Depends(UpdateUserProfileUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.update(
        user_id=current_user.id or 0,
        name=request.name,
        password=request.password.get_secret_value() if request.password else None,
        hp=request.hp,
        address=request.address,
    )
    return UserResponse.from_entity(user_entity)


@router.get('/all', response_model=List[UserResponse])
@Logger.io
async def list_users(
    _admin: UserEntity = Depends(require_admin),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> List[UserResponse]:
    return [UserResponse.from_entity(u) for u in await use_case.list_all()]


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_user(
    user_id: int,
    admin: UserEntity = Depends(require_admin),
    use_case: DeleteUserUseCase = Depends(DeleteUserUseCase.depends),
) -> None:
    await use_case.delete(user_id=user_id, acting_user_id=admin.id or 0)
