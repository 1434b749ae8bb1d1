"""
Endpoint de santé pour vérifier la disponibilité de l'API et de la base.

Expose `/health` pour signaler l'état général de l'application et du stockage.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from horoscope_backend.api.deps import get_container
from horoscope_backend.core.container import Container
from horoscope_backend.core.http_constants import HTTP_OK, HTTP_SERVICE_UNAVAILABLE

router = APIRouter(tags=["health"])


@router.get("/health")
def health(container: Container = Depends(get_container)):
    """Vérifie la disponibilité de l'API et du backend de stockage (503 si la base est KO)."""
    db_ok = container.database_ok()
    return JSONResponse(
        status_code=HTTP_OK if db_ok else HTTP_SERVICE_UNAVAILABLE,
        content={
            "status": "ok" if db_ok else "degraded",
            "storage": container.storage_backend,
            "database": db_ok,
        },
    )
