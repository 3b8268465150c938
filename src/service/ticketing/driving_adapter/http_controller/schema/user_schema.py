"""
User API Schemas - Pydantic models for request/response

Field contents are checked by the domain validators so every rule reports
through the same {field, message} error list.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, SecretStr

from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole


class CreateUserRequest(BaseModel):
    name: str
    email: str
    password: SecretStr
    hp: str
    address: str

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'John Doe',
                'email': 'user@example.com',
                'password': 'P@ssw0rd',
                'hp': '0912345678',
                'address': 'No. 1, Section 1, Zhongxiao E. Rd, Taipei',
            }
        }
    )


class LoginRequest(BaseModel):
    email: str
    password: SecretStr

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'user@example.com', 'password': 'P@ssw0rd'}}
    )


class RefreshRequest(BaseModel):
    refresh_token: str


class UpdateUserRequest(BaseModel):
    name: Optional[str] = None
    password: Optional[SecretStr] = None
    hp: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'name': 'Jane Doe', 'address': 'Kaohsiung'}}
    )


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    hp: str
    address: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'John Doe',
                'email': 'user@example.com',
                'hp': '0912345678',
                'address': 'Taipei',
                'role': 'customer',
                'created_at': '2025-01-10T10:30:00',
                'updated_at': '2025-01-10T10:30:00',
            }
        }
    )

    @classmethod
    def from_entity(cls, user_entity: UserEntity) -> 'UserResponse':
        return cls(
            id=user_entity.id or 0,
            name=user_entity.name,
            email=user_entity.email,
            hp=user_entity.hp,
            address=user_entity.address,
            role=user_entity.role,
            created_at=user_entity.created_at,
            updated_at=user_entity.updated_at,
        )


class LoginResponse(BaseModel):
    name: str
    access_token: str
    refresh_token: str
    token_type: str = 'Bearer'
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'John Doe',
                'access_token': 'eyJhbGciOiJIUzI1NiIs...',
                'refresh_token': 'eyJhbGciOiJIUzI1NiIs...',
                'token_type': 'Bearer',
                'expires_in': 1800,
            }
        }
    )


class RefreshResponse(BaseModel):
    access_token: str
    token_type: str = 'Bearer'
    expires_in: int
