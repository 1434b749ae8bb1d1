"""
Actions liées aux profils astrologiques de l'utilisateur connecté.

Chaque action est un `POST /actions/<nom>` avec un corps JSON (camelCase). Un profil n'est visible
et modifiable que par son propriétaire.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from horoscope_backend.api.deps import get_current_user, get_stores
from horoscope_backend.api.schemas import ActionResponse, ErrorResponse
from horoscope_backend.app.metrics import observe_action
from horoscope_backend.domain.entities import User
from horoscope_backend.domain.services import ProfileService
from horoscope_backend.infra.repo.record_store import Stores

router = APIRouter(
    prefix="/actions",
    tags=["profiles"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
current_user_dep = Depends(get_current_user)
stores_dep = Depends(get_stores)


@router.post("/createProfile", response_model=ActionResponse)
def create_profile(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Crée un profil pour l'utilisateur connecté; renvoie `{id}`."""
    service = ProfileService(stores)
    return observe_action("createProfile", service.create_profile, payload, user)


@router.post("/updateProfile", response_model=ActionResponse)
def update_profile(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Met à jour les seuls champs fournis d'un profil possédé; renvoie `{id}`."""
    service = ProfileService(stores)
    return observe_action("updateProfile", service.update_profile, payload, user)


@router.post("/deleteProfile", response_model=ActionResponse)
def delete_profile(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Supprime définitivement un profil possédé; renvoie `{id}`."""
    service = ProfileService(stores)
    return observe_action("deleteProfile", service.delete_profile, payload, user)


@router.post("/listProfiles", response_model=ActionResponse)
def list_profiles(
    payload: dict[str, Any] | None = Body(default=None),
    user: User | None = current_user_dep,
    stores: Stores = stores_dep,
):
    """Liste tous les profils de l'utilisateur connecté (`{items, total}`, sans pagination)."""
    service = ProfileService(stores)
    return observe_action("listProfiles", service.list_profiles, payload, user)
