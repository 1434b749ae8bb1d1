"""
Actions liées aux horoscopes quotidiens et au journal de consultation.

La lecture (`getDailyHoroscope`, `listDailyHoroscopes`) est publique; la publication, la
modification et la journalisation d'une consultation exigent un appelant authentifié.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from horoscope_backend.api.deps import get_current_user, get_stores
from horoscope_backend.api.schemas import ActionResponse, ErrorResponse
from horoscope_backend.app.metrics import observe_action
from horoscope_backend.domain.entities import User
from horoscope_backend.domain.services import DailyHoroscopeService, ViewLogService
from horoscope_backend.infra.repo.record_store import Stores

router = APIRouter(
    prefix="/actions",
    tags=["horoscope"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
current_user_dep = Depends(get_current_user)
stores_dep = Depends(get_stores)


@router.post("/createDailyHoroscope", response_model=ActionResponse)
def create_daily_horoscope(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Publie le contenu d'un signe pour une date; renvoie `{id, ownerId}`."""
    service = DailyHoroscopeService(stores)
    return observe_action("createDailyHoroscope", service.create_daily_horoscope, payload, user)


@router.post("/updateDailyHoroscope", response_model=ActionResponse)
def update_daily_horoscope(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Modifie un contenu existant (sans contrôle d'auteur); renvoie `{id}`."""
    service = DailyHoroscopeService(stores)
    return observe_action("updateDailyHoroscope", service.update_daily_horoscope, payload, user)


@router.post("/getDailyHoroscope", response_model=ActionResponse)
def get_daily_horoscope(
    payload: dict[str, Any] | None = Body(default=None), stores: Stores = stores_dep
):
    """
    Retourne l'horoscope d'un signe pour une date (aujourd'hui par défaut).

    Paramètres (corps):
    - zodiacSign: code du signe (requis)
    - horoscopeDate: date ISO (optionnelle)
    - language: code langue (optionnel, restreint la recherche)

    Retour: `{horoscope}`; 404 si aucun contenu ne correspond.
    """
    service = DailyHoroscopeService(stores)
    return observe_action("getDailyHoroscope", service.get_daily_horoscope, payload)


@router.post("/listDailyHoroscopes", response_model=ActionResponse)
def list_daily_horoscopes(
    payload: dict[str, Any] | None = Body(default=None), stores: Stores = stores_dep
):
    """Liste les contenus filtrés par signe/date/langue (`{items, total}`)."""
    service = DailyHoroscopeService(stores)
    return observe_action("listDailyHoroscopes", service.list_daily_horoscopes, payload)


@router.post("/logHoroscopeView", response_model=ActionResponse)
def log_horoscope_view(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Journalise une consultation (profil et horoscope optionnels); renvoie `{id}`."""
    service = ViewLogService(stores)
    return observe_action("logHoroscopeView", service.log_horoscope_view, payload, user)
