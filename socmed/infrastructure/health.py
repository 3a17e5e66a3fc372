# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import func, select

from socmed.infrastructure.db.models import User
from socmed.infrastructure.db.session import session_scope


def check_database() -> int:
    """Round-trip to the users table; returns the account count."""
    with session_scope() as session:
        return int(session.scalar(select(func.count()).select_from(User)) or 0)


__all__ = ["check_database"]
