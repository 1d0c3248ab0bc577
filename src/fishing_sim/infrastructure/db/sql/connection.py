from __future__ import annotations

import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


DEFAULT_DATABASE_URL = "sqlite:///fishing_sim.db"


def database_url() -> str:
    return os.getenv("FISHING_DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL


def create_db_engine(url: str | None = None, *, echo: bool = False) -> Engine:
    target = url or database_url()
    if target in {"sqlite://", "sqlite:///:memory:"}:
        # an in-memory database lives only as long as its one connection
        return create_engine(
            target,
            echo=echo,
            future=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    if target.startswith("sqlite"):
        return create_engine(target, echo=echo, future=True, connect_args={"check_same_thread": False})
    return create_engine(target, echo=echo, future=True, pool_pre_ping=True)


def create_session_factory(url: str | None = None, *, engine: Engine | None = None) -> sessionmaker:
    bound = engine or create_db_engine(url)
    return sessionmaker(bind=bound, expire_on_commit=False)
