"""
Script de chargement d'horoscopes quotidiens depuis un fichier JSON.

Chaque entrée passe par `DailyHoroscopeService.create_daily_horoscope` (mêmes validations que
l'action HTTP). Les entrées invalides sont signalées puis ignorées.

Format attendu du JSON: liste d'objets camelCase
    [{"horoscopeDate": "2024-01-01", "zodiacSign": "aries", "generalText": "...", ...}]
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

# Permet l'exécution directe (python horoscope_backend/scripts/seed_daily_horoscopes.py)
SYS_ROOT = Path(__file__).resolve().parents[2]
if str(SYS_ROOT) not in sys.path:
    sys.path.append(str(SYS_ROOT))

from horoscope_backend.core.container import Container  # noqa: E402
from horoscope_backend.domain.entities import User  # noqa: E402
from horoscope_backend.domain.errors import ValidationError  # noqa: E402
from horoscope_backend.domain.services import DailyHoroscopeService  # noqa: E402
from horoscope_backend.infra.repo.record_store import Stores  # noqa: E402


def load_entries(path: str) -> list[dict[str, Any]]:
    """Charge les entrées depuis `path`; liste vide si le fichier n'existe pas."""
    if not os.path.exists(path):
        return []
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError("expected a JSON list of daily horoscopes")
    return [e for e in raw if isinstance(e, dict)]


def seed(
    container: Container, entries: Sequence[dict[str, Any]], user_id: str
) -> tuple[list[str], list[tuple[int, str]]]:
    """Insère les entrées dans une seule transaction.

    Retourne (ids créés, [(index, message)] des entrées rejetées).
    """
    created: list[str] = []
    rejected: list[tuple[int, str]] = []
    publisher = User(id=user_id)
    with container.session() as session:
        service = DailyHoroscopeService(Stores.from_session(session))
        for index, entry in enumerate(entries):
            try:
                result = service.create_daily_horoscope(entry, publisher)
            except ValidationError as err:
                rejected.append((index, err.message))
                continue
            created.append(result["data"]["id"])
    return created, rejected


def main(argv: Sequence[str] | None = None) -> int:
    """Point d'entrée: lit le JSON et publie les horoscopes."""
    parser = argparse.ArgumentParser(description="Chargement d'horoscopes quotidiens (JSON)")
    parser.add_argument("path", help="Chemin du fichier JSON")
    parser.add_argument(
        "--user-id",
        default="seed-script",
        help="Identité de publication utilisée pour les créations",
    )
    args = parser.parse_args(argv)

    entries = load_entries(args.path)
    if not entries:
        print(f"[seed] aucune entrée chargée depuis {args.path}")
        return 0

    created, rejected = seed(Container(), entries, args.user_id)
    for index, message in rejected:
        print(f"[seed] entrée {index} ignorée: {message}")
    print(f"[seed] créés: {len(created)} / {len(entries)}")
    return 0 if not rejected else 1


if __name__ == "__main__":
    raise SystemExit(main())
