# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from socmed.shared.config import load_config
from socmed.shared.config.settings import DatabaseConfig
from socmed.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _engine_options(database: DatabaseConfig) -> dict[str, Any]:
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_size": database.pool_size,
        "max_overflow": database.max_overflow,
        "pool_timeout": database.pool_timeout,
    }
    if database.url.startswith("sqlite"):
        # Threaded WSGI workers share the pool; writers wait on the busy timeout
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": database.pool_timeout,
        }
    return options


_database = load_config().database
ENGINE: Engine = create_engine(_database.url, **_engine_options(_database))

SessionLocal = scoped_session(sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False))


@contextmanager
def session_scope() -> Iterator[Session]:
    """One transaction per store call: committed on success, rolled back on any error."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        SessionLocal.remove()


def init_db() -> None:
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"db: users schema ready on {ENGINE.url.render_as_string(hide_password=True)}")
