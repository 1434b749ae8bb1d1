"""
Vérification des jetons d'identité.

L'émission des jetons relève du fournisseur d'identité externe; ce module ne fait que créer des
jetons de développement (tests, scripts) et décoder ceux présentés par les appelants.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from horoscope_backend.domain.entities import User


class TokenData(BaseModel):
    """Données contenues dans un token JWT."""

    sub: str
    email: str | None = None


def create_access_token(
    secret: str, alg: str, expires_min: int, payload: dict[str, Any]
) -> str:
    """Crée un token JWT d'accès avec expiration."""
    to_encode = payload.copy()
    expire = datetime.now(UTC) + timedelta(minutes=expires_min)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=alg)


def decode_token(token: str, secret: str, alg: str) -> TokenData | None:
    """Décode et valide un token JWT; None si invalide, expiré ou incomplet."""
    try:
        data = jwt.decode(token, secret, algorithms=[alg])
        return TokenData(**data)
    except (InvalidTokenError, PydanticValidationError):
        return None


def user_from_token(token: str, secret: str, alg: str) -> User | None:
    """Résout l'identité de l'appelant (`sub` = identifiant utilisateur stable)."""
    data = decode_token(token, secret, alg)
    if data is None or not data.sub:
        return None
    return User(id=data.sub, email=data.email)
