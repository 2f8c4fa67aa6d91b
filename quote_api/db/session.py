from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from quote_api.core.config import Settings


class Base(DeclarativeBase):
    pass


def build_engine(cfg: Settings) -> Engine:
    kwargs: dict = {"future": True}
    if cfg.is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        # Bounded pool: requests wait for a free connection rather than open new ones.
        kwargs.update(
            pool_size=cfg.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=cfg.DB_POOL_TIMEOUT_SECONDS,
            pool_pre_ping=True,
        )
    return create_engine(cfg.DATABASE_URL, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
