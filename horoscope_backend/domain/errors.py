"""Erreurs typées des actions.

Chaque erreur porte un code machine stable (`code`) et le statut HTTP associé. Une
erreur est terminale pour la requête: la session est annulée et rien n'est écrit.
"""

from __future__ import annotations

from typing import Any

from horoscope_backend.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_FORBIDDEN,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
    HTTP_UNAUTHORIZED,
)


class ErrorCodes:
    """Codes d'erreur exposés aux clients."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ActionError(Exception):
    """Erreur de base d'une action, avec code et statut HTTP."""

    code = ErrorCodes.INTERNAL_ERROR
    status_code = HTTP_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ActionError):
    """Entrée mal formée ou champ requis manquant."""

    code = ErrorCodes.VALIDATION_ERROR
    status_code = HTTP_BAD_REQUEST


class Unauthorized(ActionError):
    """Aucune identité authentifiée."""

    code = ErrorCodes.UNAUTHORIZED
    status_code = HTTP_UNAUTHORIZED


class Forbidden(ActionError):
    """Identité présente mais sans droit sur la ressource référencée."""

    code = ErrorCodes.FORBIDDEN
    status_code = HTTP_FORBIDDEN


class NotFound(ActionError):
    """Enregistrement absent (ou non possédé pour les lectures filtrées par propriétaire)."""

    code = ErrorCodes.NOT_FOUND
    status_code = HTTP_NOT_FOUND
