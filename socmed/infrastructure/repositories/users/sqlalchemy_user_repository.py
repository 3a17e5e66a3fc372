# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from socmed.domain.users.entities import UserAccount
from socmed.domain.users.exceptions import EmailAlreadyRegisteredError
from socmed.domain.users.repositories import UserRepository
from socmed.infrastructure.db.models import User
from socmed.infrastructure.db.session import session_scope


def _to_domain(row: User) -> UserAccount:
    return UserAccount(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        gender=row.gender,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> UserAccount | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> UserAccount | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: UserAccount) -> UserAccount:
        try:
            with session_scope() as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    gender=user.gender,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race against a concurrent registration for the same email
            raise EmailAlreadyRegisteredError() from exc
