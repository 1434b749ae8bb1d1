"""
Application principale FastAPI.

Ce module assemble les composants de l'application : logging, conteneur, middlewares, gestion des
erreurs et routes d'actions.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Attacher le conteneur (settings, base de données) à `app.state`
- Ajouter les middlewares (request id, timing, métriques)
- Monter les routers (santé, profils, horoscopes, métriques)
"""

from __future__ import annotations

from fastapi import FastAPI

from horoscope_backend.api.routes_health import router as health_router
from horoscope_backend.api.routes_horoscope import router as horoscope_router
from horoscope_backend.api.routes_profiles import router as profiles_router
from horoscope_backend.apigw.errors import install_error_handlers
from horoscope_backend.app.metrics import PrometheusMiddleware, metrics_router
from horoscope_backend.core.container import Container
from horoscope_backend.core.logging import setup_logging
from horoscope_backend.middlewares.request_id import RequestIDMiddleware
from horoscope_backend.middlewares.timing import TimingMiddleware


def create_app(container: Container | None = None) -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Crée le conteneur si aucun n'est fourni (les tests injectent le leur)
    - Configure le logging structuré (structlog)
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes de santé, d'actions et de métriques
    """
    container = container or Container()
    settings = container.settings
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.state.container = container
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    install_error_handlers(app)
    app.include_router(health_router)
    app.include_router(profiles_router)
    app.include_router(horoscope_router)
    app.include_router(metrics_router)
    return app
