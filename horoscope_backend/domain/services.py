"""
Services métier des actions (profils, horoscopes quotidiens, consultations).

Chaque méthode suit la même séquence:
1. validation de l'entrée (modèle Pydantic) avant tout accès au stockage;
2. résolution de l'identité (sauf lectures publiques des horoscopes);
3. contrôle de propriété par relecture filtrée sur (id, user_id);
4. effet sur les stores;
5. réponse `{"success": True, "data": ...}`.

Les contrôles « existe puis écrit » ne sont pas verrouillés: une ligne peut disparaître entre la
lecture et l'écriture (fenêtre acceptée).
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

import structlog
from pydantic import ValidationError as PydanticValidationError

from horoscope_backend.domain.entities import (
    ActionInput,
    DailyHoroscopeCreate,
    DailyHoroscopeFilter,
    DailyHoroscopeQuery,
    DailyHoroscopeRecord,
    DailyHoroscopeUpdate,
    EmptyInput,
    ProfileCreate,
    ProfileRecord,
    ProfileRef,
    ProfileUpdate,
    User,
    ViewLogCreate,
)
from horoscope_backend.domain.errors import Forbidden, NotFound, Unauthorized, ValidationError
from horoscope_backend.infra.repo.record_store import Stores

log = structlog.get_logger(__name__)

InputT = TypeVar("InputT", bound=ActionInput)
Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


def parse_input(model: type[InputT], payload: Mapping[str, Any] | None) -> InputT:
    """Valide `payload` contre `model`; lève ValidationError si mal formé.

    Une entrée absente (`None`) équivaut à un objet vide.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Input must be an object.")
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as err:
        errors = [
            {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
            for e in err.errors()
        ]
        raise ValidationError("Invalid input.", details={"errors": errors}) from err


def require_user(user: User | None) -> User:
    """Retourne l'utilisateur authentifié ou lève Unauthorized."""
    if user is None:
        raise Unauthorized("You must be signed in to perform this action.")
    return user


def ok(data: dict[str, Any]) -> dict[str, Any]:
    return {"success": True, "data": data}


class _BaseService:
    def __init__(
        self,
        stores: Stores,
        clock: Clock = utcnow,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        """Initialise le service avec ses dépendances.

        Paramètres:
        - stores: stores liés à la session de la requête.
        - clock: source de l'heure courante (UTC).
        - id_factory: générateur d'identifiants opaques.
        """
        self.stores = stores
        self.clock = clock
        self.new_id = id_factory


class ProfileService(_BaseService):
    """Profils astrologiques, visibles et modifiables par leur seul propriétaire.

    Un profil d'un autre utilisateur est traité exactement comme un profil inexistant.
    """

    def create_profile(self, payload: Mapping[str, Any] | None, user: User | None) -> dict[str, Any]:
        data = parse_input(ProfileCreate, payload)
        user = require_user(user)
        now = self.clock()
        profile_id = self.new_id()
        self.stores.profiles.insert(
            {
                **data.provided(),
                "id": profile_id,
                "user_id": user.id,
                "created_at": now,
                "updated_at": now,
            }
        )
        log.info("profile_created", profile_id=profile_id, user_id=user.id)
        return ok({"id": profile_id})

    def _owned(self, profile_id: str, user: User) -> dict[str, Any]:
        existing = self.stores.profiles.find_one(id=profile_id, user_id=user.id)
        if existing is None:
            log.warning("profile_not_found", profile_id=profile_id, user_id=user.id)
            raise NotFound("Profile not found.")
        return existing

    def update_profile(self, payload: Mapping[str, Any] | None, user: User | None) -> dict[str, Any]:
        data = parse_input(ProfileUpdate, payload)
        user = require_user(user)
        self._owned(data.id, user)

        updates = data.provided()
        updates.pop("id", None)
        updates["updated_at"] = self.clock()
        self.stores.profiles.update({"id": data.id, "user_id": user.id}, updates)
        log.info("profile_updated", profile_id=data.id, fields=sorted(updates))
        return ok({"id": data.id})

    def delete_profile(self, payload: Mapping[str, Any] | None, user: User | None) -> dict[str, Any]:
        data = parse_input(ProfileRef, payload)
        user = require_user(user)
        self._owned(data.id, user)

        self.stores.profiles.delete(id=data.id, user_id=user.id)
        log.info("profile_deleted", profile_id=data.id, user_id=user.id)
        return ok({"id": data.id})

    def list_profiles(
        self, payload: Mapping[str, Any] | None, user: User | None
    ) -> dict[str, Any]:
        parse_input(EmptyInput, payload)
        user = require_user(user)
        rows = self.stores.profiles.find(user_id=user.id)
        items = [ProfileRecord.model_validate(r).to_wire() for r in rows]
        return ok({"items": items, "total": len(items)})


class DailyHoroscopeService(_BaseService):
    """Contenus quotidiens par signe: publication authentifiée, lecture publique.

    Aucun contrôle d'auteur: tout appelant authentifié peut créer ou modifier un contenu.
    """

    def create_daily_horoscope(
        self, payload: Mapping[str, Any] | None, user: User | None
    ) -> dict[str, Any]:
        data = parse_input(DailyHoroscopeCreate, payload)
        user = require_user(user)
        horoscope_id = self.new_id()
        self.stores.horoscopes.insert(
            {**data.provided(), "id": horoscope_id, "created_at": self.clock()}
        )
        log.info(
            "daily_horoscope_created",
            horoscope_id=horoscope_id,
            zodiac_sign=data.zodiac_sign,
            horoscope_date=data.horoscope_date.isoformat(),
        )
        return ok({"id": horoscope_id, "ownerId": user.id})

    def update_daily_horoscope(
        self, payload: Mapping[str, Any] | None, user: User | None
    ) -> dict[str, Any]:
        data = parse_input(DailyHoroscopeUpdate, payload)
        require_user(user)
        if self.stores.horoscopes.find_one(id=data.id) is None:
            raise NotFound("Daily horoscope not found.")

        updates = data.provided()
        updates.pop("id", None)
        self.stores.horoscopes.update({"id": data.id}, updates)
        log.info("daily_horoscope_updated", horoscope_id=data.id, fields=sorted(updates))
        return ok({"id": data.id})

    def get_daily_horoscope(
        self, payload: Mapping[str, Any] | None, user: User | None = None
    ) -> dict[str, Any]:
        """Retourne le premier horoscope du signe pour la date (aujourd'hui par défaut).

        Plusieurs lignes peuvent correspondre; la première trouvée est renvoyée.
        """
        query = parse_input(DailyHoroscopeQuery, payload)
        filters: dict[str, Any] = {
            "zodiac_sign": query.zodiac_sign,
            "horoscope_date": query.horoscope_date or self.clock().date(),
        }
        if query.language:
            filters["language"] = query.language

        row = self.stores.horoscopes.find_one(**filters)
        if row is None:
            raise NotFound("No horoscope found for the given sign and date.")
        return ok({"horoscope": DailyHoroscopeRecord.model_validate(row).to_wire()})

    def list_daily_horoscopes(
        self, payload: Mapping[str, Any] | None, user: User | None = None
    ) -> dict[str, Any]:
        query = parse_input(DailyHoroscopeFilter, payload)
        filters = {k: v for k, v in query.provided().items() if v}
        rows = self.stores.horoscopes.find(**filters)
        items = [DailyHoroscopeRecord.model_validate(r).to_wire() for r in rows]
        return ok({"items": items, "total": len(items)})


class ViewLogService(_BaseService):
    """Journal des consultations; chaque entrée appartient à l'appelant."""

    def log_horoscope_view(
        self, payload: Mapping[str, Any] | None, user: User | None
    ) -> dict[str, Any]:
        data = parse_input(ViewLogCreate, payload)
        user = require_user(user)

        profile_id = data.profile_id or None
        horoscope_id = data.daily_horoscope_id or None

        if profile_id and self.stores.profiles.find_one(id=profile_id, user_id=user.id) is None:
            log.warning("view_profile_forbidden", profile_id=profile_id, user_id=user.id)
            raise Forbidden("Profile not found for this user.")

        if horoscope_id and self.stores.horoscopes.find_one(id=horoscope_id) is None:
            raise NotFound("Daily horoscope not found.")

        view_id = self.new_id()
        now = self.clock()
        self.stores.views.insert(
            {
                "id": view_id,
                "profile_id": profile_id,
                "user_id": user.id,
                "daily_horoscope_id": horoscope_id,
                "viewed_at": now,
                "device_info": data.device_info,
                "created_at": now,
            }
        )
        log.info("horoscope_viewed", view_id=view_id, user_id=user.id)
        return ok({"id": view_id})
