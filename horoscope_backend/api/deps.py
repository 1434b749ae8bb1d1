"""Dépendances partagées pour les routes de l'API.

But du module
-------------
- Fournir aux endpoints le conteneur de l'application, une session par requête et l'identité de
  l'appelant.
- Ne jamais échouer sur une identité absente: les services décident si elle est requise.
"""

from collections.abc import Iterator

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from horoscope_backend.core.container import Container
from horoscope_backend.domain.auth import user_from_token
from horoscope_backend.domain.entities import User
from horoscope_backend.infra.repo.record_store import Stores


def get_container(request: Request) -> Container:
    """Conteneur attaché à l'application par `create_app`."""
    return request.app.state.container


def get_session(container: Container = Depends(get_container)) -> Iterator[Session]:
    """Session transactionnelle de la requête; rollback si l'action échoue."""
    with container.session() as session:
        yield session


def get_stores(session: Session = Depends(get_session)) -> Stores:
    return Stores.from_session(session)


def get_current_user(
    authorization: str | None = Header(None),
    container: Container = Depends(get_container),
) -> User | None:
    """Extrait l'utilisateur courant du jeton Bearer; None si absent ou invalide."""
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    token = authorization.split(" ", 1)[1].strip()
    return user_from_token(token, container.settings.JWT_SECRET, container.settings.JWT_ALG)
