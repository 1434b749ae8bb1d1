"""DB utilities for SQLAlchemy sessions/engine.

Uses the `DATABASE_URL` setting; tests pass an in-memory SQLite engine explicitly.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from horoscope_backend.infra.repo.models import Base


def get_engine(url: str) -> Engine:
    """Crée un moteur SQLAlchemy à partir de l'URL de base de données.

    Une base SQLite en mémoire partage une unique connexion (`StaticPool`) afin que
    toutes les sessions voient les mêmes tables.
    """
    connect_args = {}
    kwargs = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=False, connect_args=connect_args, **kwargs)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Crée une factory de sessions SQLAlchemy."""
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Crée les tables manquantes (dev/tests; Alembic gère la production)."""
    Base.metadata.create_all(engine)


@contextmanager
def session_scope(factory: sessionmaker) -> Iterator[Session]:
    """Contexte de session avec gestion automatique des transactions.

    Commit en sortie normale, rollback puis propagation en cas d'exception.
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
