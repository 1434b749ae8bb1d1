"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _resolve_env_file() -> Path | str:
    """Détermine le fichier .env à utiliser (ENV_FILE > .env.{APP_ENV} > .env)."""
    explicit = os.getenv("ENV_FILE")
    if explicit:
        return explicit
    cwd = Path.cwd()
    specific = cwd / f".env.{os.getenv('APP_ENV', 'dev')}"
    if specific.exists():
        return specific
    return cwd / ".env"


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file(),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )
    APP_NAME: str = "horoscope-store"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = False
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # Persistance
    DATABASE_URL: str = "sqlite+pysqlite:///./horoscope.db"
    # Création des tables au démarrage (dev); Alembic en production
    DB_CREATE_ALL: bool = True

    # JWT (vérification des jetons émis par le fournisseur d'identité)
    JWT_SECRET: str = "dev-secret-change-me"
    JWT_ALG: str = "HS256"
    JWT_EXPIRES_MIN: int = 60

    LOG_LEVEL: str = "INFO"


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
