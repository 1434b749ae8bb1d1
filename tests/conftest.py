"""Configuration de test pour pytest avec gestion des chemins et base SQLite en mémoire.

Ce module ajoute la racine du projet au sys.path et fournit un conteneur branché sur une base
SQLite en mémoire, un client HTTP et des helpers d'authentification.
"""

import os
import sys
from collections.abc import Callable, Iterator
from typing import Any

import pytest

# Ensure project root is on sys.path so that
# imports like `from horoscope_backend...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402

from horoscope_backend.app.main import create_app  # noqa: E402
from horoscope_backend.core.container import Container  # noqa: E402
from horoscope_backend.core.settings import Settings  # noqa: E402
from horoscope_backend.infra.repo.db import create_schema, get_engine  # noqa: E402
from horoscope_backend.infra.repo.record_store import Stores  # noqa: E402
from tests.fakes import TEST_JWT_SECRET, FakeClock, SequentialIds, make_token  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings de test, indépendants de tout fichier .env."""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+pysqlite:///:memory:",
        DB_CREATE_ALL=True,
        JWT_SECRET=TEST_JWT_SECRET,
        JWT_ALG="HS256",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    """Moteur SQLite en mémoire partagé par toutes les sessions du test."""
    eng = get_engine(settings.DATABASE_URL)
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def container(settings: Settings, engine: Engine) -> Container:
    return Container(settings=settings, engine=engine)


@pytest.fixture
def client(container: Container) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def call(container: Container, clock: FakeClock) -> Callable[..., dict[str, Any]]:
    """Exécute une méthode de service dans sa propre session (comme une requête)."""

    def _call(service_cls, method: str, payload=None, user=None) -> dict[str, Any]:
        with container.session() as session:
            service = service_cls(Stores.from_session(session), clock=clock)
            return getattr(service, method)(payload, user)

    return _call


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def auth() -> Callable[[str], dict[str, str]]:
    """Retourne les en-têtes d'autorisation pour un identifiant utilisateur."""

    def _auth(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _auth
