"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, moteur SQLAlchemy, factory de sessions). Le
conteneur est créé par `create_app` et attaché à `app.state`; aucun handle de base de données
n'est partagé au niveau module.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from horoscope_backend.core.settings import Settings, get_settings
from horoscope_backend.infra.repo.db import (
    create_schema,
    get_engine,
    get_session_factory,
    session_scope,
)


class Container:
    def __init__(self, settings: Settings | None = None, engine: Engine | None = None):
        """Construit les dépendances; `engine` permet d'injecter une base de test."""
        self.settings = settings or get_settings()
        self.engine = engine or get_engine(self.settings.DATABASE_URL)
        self.session_factory = get_session_factory(self.engine)
        if self.settings.DB_CREATE_ALL:
            create_schema(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session transactionnelle d'une requête (commit/rollback automatiques)."""
        with session_scope(self.session_factory) as session:
            yield session

    def database_ok(self) -> bool:
        """Vérifie que la base répond à une requête triviale."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            return False
        return True

    @property
    def storage_backend(self) -> str:
        return self.engine.dialect.name
