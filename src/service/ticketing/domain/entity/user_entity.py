from datetime import datetime
from enum import Enum
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import AuthenticationError, DomainError
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    ADMIN = 'admin'
    CUSTOMER = 'customer'


def normalize_email(email: str) -> str:
    return email.strip().lower()


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    hp: str = ''
    address: str = ''
    id: Optional[int] = None
    role: UserRole = UserRole.CUSTOMER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        # Same message for unknown email and wrong password
        if not user_entity:
            raise AuthenticationError('email or password wrong')

        return user_entity

    @staticmethod
    def validate_role(role: str) -> UserRole:
        try:
            return UserRole(role)
        except ValueError:
            valid_roles = ', '.join(r.value for r in UserRole)
            raise DomainError(f'Invalid role: {role}. Must be one of: {valid_roles}')

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def verify_password(self, plain_password: str, password_hasher: IPasswordHasher) -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        )
