"""
Token service

Access and refresh tokens are HS256 JWTs carrying the user's identity and
role, so authorization checks need no database round trip.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole, normalize_email


ACCESS_TOKEN = 'access'
REFRESH_TOKEN = 'refresh'


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.access_token_expire = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.refresh_token_expire = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

    def _encode(self, user_entity: UserEntity, *, token_type: str, expires_in: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + expires_in,
            'iat': now,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'name': user_entity.name,
            'role': user_entity.role.value,
            'token_type': token_type,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def create_access_token(self, user_entity: UserEntity) -> str:
        return self._encode(
            user_entity, token_type=ACCESS_TOKEN, expires_in=self.access_token_expire
        )

    def create_refresh_token(self, user_entity: UserEntity) -> str:
        return self._encode(
            user_entity, token_type=REFRESH_TOKEN, expires_in=self.refresh_token_expire
        )

    @property
    def access_token_expires_in(self) -> int:
        return int(self.access_token_expire.total_seconds())

    def decode_token(self, token: str, *, expected_type: str = ACCESS_TOKEN) -> Dict[str, Any]:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError('Token expired')
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

        if payload.get('token_type') != expected_type:
            raise AuthenticationError('Invalid token type')
        return payload

    async def authenticate_user(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        email: str,
        password: str,
    ) -> UserEntity:
        user_entity = await user_query_repo.get_by_email(email=normalize_email(email))
        validated_user = UserEntity.validate_user_exists(user_entity)

        if not validated_user.verify_password(password, password_hasher):
            raise AuthenticationError('email or password wrong')

        return validated_user

    def user_from_payload(self, payload: Dict[str, Any]) -> UserEntity:
        user_id = payload.get('user_id')
        email = payload.get('email')
        name = payload.get('name')
        role = payload.get('role')

        if not user_id or not email or not name or role not in {r.value for r in UserRole}:
            raise AuthenticationError('Invalid token')

        # Rebuilt from claims, no DB query
        return UserEntity(id=user_id, email=email, name=name, role=UserRole(role))

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')
        return self.user_from_payload(self.decode_token(token, expected_type=ACCESS_TOKEN))
