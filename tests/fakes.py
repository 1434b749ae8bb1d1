"""
Fakes pour les tests unitaires.

Horloge et générateur d'identifiants déterministes injectés dans les services, jetons de test.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from horoscope_backend.domain.auth import create_access_token


class FakeClock:
    """
    Horloge factice: chaque appel avance d'une seconde.

    Permet de vérifier qu'une mise à jour fait progresser `updatedAt`.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 3, 10, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


class SequentialIds:
    """Identifiants prévisibles `id-1`, `id-2`, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


TEST_JWT_SECRET = "test-secret"


def make_token(user_id: str, secret: str = TEST_JWT_SECRET, expires_min: int = 5) -> str:
    """Jeton Bearer signé avec le secret de test."""
    return create_access_token(
        secret=secret, alg="HS256", expires_min=expires_min, payload={"sub": user_id}
    )
