# ============================================================
# Module : horoscope_backend/infra/repo/record_store.py
# Objet  : Accès SQL (CRUD) générique par filtres d'égalité.
# Notes  : aucune jointure; les contrôles croisés sont faits par l'appelant.
# ============================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from horoscope_backend.domain.errors import NotFound
from horoscope_backend.infra.repo.models import (
    Base,
    DailyHoroscopeORM,
    HoroscopeProfileORM,
    HoroscopeViewORM,
)


class RecordStore:
    """CRUD minimal sur une table, filtres = conjonction d'égalités.

    Les enregistrements sont échangés sous forme de dict (clé = nom de colonne).
    Une valeur de filtre `None` se traduit par `IS NULL`.
    """

    def __init__(self, session: Session, model: type[Base]) -> None:
        """Construit le store avec une session (SQLAlchemy) et le modèle ciblé."""
        self._session = session
        self._model = model
        self._columns = tuple(c.key for c in model.__table__.columns)

    @property
    def name(self) -> str:
        return self._model.__tablename__

    def _check_fields(self, fields: dict[str, Any]) -> None:
        unknown = set(fields) - set(self._columns)
        if unknown:
            raise ValueError(f"unknown fields for {self.name}: {sorted(unknown)}")

    def _conditions(self, filters: dict[str, Any]) -> list[Any]:
        self._check_fields(filters)
        conditions = []
        for key, value in filters.items():
            column = getattr(self._model, key)
            conditions.append(column.is_(None) if value is None else column == value)
        return conditions

    def _to_dict(self, row: Base) -> dict[str, Any]:
        return {key: getattr(row, key) for key in self._columns}

    def insert(self, values: dict[str, Any]) -> dict[str, Any]:
        """Insère une ligne et la renvoie (après flush)."""
        self._check_fields(values)
        row = self._model(**values)
        self._session.add(row)
        self._session.flush()
        return self._to_dict(row)

    def find(self, limit: int | None = None, **filters: Any) -> list[dict[str, Any]]:
        """Retourne les lignes correspondant à tous les filtres (ordre non garanti)."""
        stmt = select(self._model).where(*self._conditions(filters))
        if limit is not None:
            stmt = stmt.limit(limit)
        rows = self._session.execute(stmt).scalars().all()
        return [self._to_dict(r) for r in rows]

    def find_one(self, **filters: Any) -> dict[str, Any] | None:
        """Retourne la première ligne correspondante, ou None."""
        rows = self.find(limit=1, **filters)
        return rows[0] if rows else None

    def count(self, **filters: Any) -> int:
        stmt = select(func.count()).select_from(self._model).where(*self._conditions(filters))
        return int(self._session.execute(stmt).scalar_one())

    def update(self, filters: dict[str, Any], values: dict[str, Any]) -> int:
        """Met à jour les lignes ciblées; lève NotFound si aucune ne correspond.

        Un dict `values` vide ne modifie rien mais vérifie tout de même l'existence.
        """
        self._check_fields(values)
        if not values:
            affected = self.count(**filters)
        else:
            stmt = update(self._model).where(*self._conditions(filters)).values(**values)
            affected = self._session.execute(stmt).rowcount
        if not affected:
            raise NotFound(f"{self.name}: no record matches {sorted(filters)}")
        return affected

    def delete(self, **filters: Any) -> int:
        """Supprime les lignes ciblées; lève NotFound si aucune ne correspond."""
        stmt = delete(self._model).where(*self._conditions(filters))
        affected = self._session.execute(stmt).rowcount
        if not affected:
            raise NotFound(f"{self.name}: no record matches {sorted(filters)}")
        return affected


@dataclass
class Stores:
    """Regroupe les stores des trois tables pour une même session."""

    profiles: RecordStore
    horoscopes: RecordStore
    views: RecordStore

    @classmethod
    def from_session(cls, session: Session) -> Stores:
        return cls(
            profiles=RecordStore(session, HoroscopeProfileORM),
            horoscopes=RecordStore(session, DailyHoroscopeORM),
            views=RecordStore(session, HoroscopeViewORM),
        )
