# Schémas Pydantic exposés par l'API (enveloppes de réponse).

from typing import Any, Literal

from pydantic import BaseModel


class ActionResponse(BaseModel):
    """Réponse d'une action réussie.

    Champs:
    - success: toujours `true`
    - data: charge utile propre à l'action (ex: `{id}`, `{items, total}`, `{horoscope}`)
    """

    success: Literal[True] = True
    data: dict[str, Any]


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Enveloppe d'erreur (documentation OpenAPI)."""

    success: Literal[False] = False
    error: ErrorBody
    trace_id: str | None = None
