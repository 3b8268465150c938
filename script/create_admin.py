#!/usr/bin/env python3
"""
Admin Seed Script

The public sign-up endpoint only creates customers; this script creates the
first admin account.

Usage:
    python -m script.create_admin --email admin@t.com --password P@ssw0rd --name "init admin"
"""

import argparse
import asyncio

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.exception.exceptions import ConflictError
from src.service.ticketing.app.command.register_user_use_case import RegisterUserUseCase
from src.service.ticketing.domain.entity.user_entity import UserRole


DEFAULT_PASSWORD = 'P@ssw0rd'


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Create an admin user')
    parser.add_argument('--email', default='admin@t.com')
    parser.add_argument('--password', default=DEFAULT_PASSWORD)
    parser.add_argument('--name', default='init admin')
    parser.add_argument('--hp', default='0900000000')
    parser.add_argument('--address', default='Taipei')
    return parser.parse_args()


async def create_admin(args: argparse.Namespace) -> None:
    if settings.IS_SQLITE:
        await create_db_and_tables()

    use_case = RegisterUserUseCase(
        user_command_repo=container.user_command_repo(),
        user_query_repo=container.user_query_repo(),
        password_hasher=container.password_hasher(),
    )
    try:
        user = await use_case.register(
            name=args.name,
            email=args.email,
            password=args.password,
            hp=args.hp,
            address=args.address,
            role=UserRole.ADMIN,
        )
        print(f'✅ Admin created: id={user.id} email={user.email}')
    except ConflictError:
        print(f'⏭️  {args.email} already exists, nothing to do')
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(create_admin(_parse_args()))
