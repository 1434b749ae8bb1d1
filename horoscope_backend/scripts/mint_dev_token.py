"""
Émet un jeton Bearer de développement pour un identifiant utilisateur.

Utile pour appeler les actions authentifiées en local; en production les jetons viennent du
fournisseur d'identité.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

SYS_ROOT = Path(__file__).resolve().parents[2]
if str(SYS_ROOT) not in sys.path:
    sys.path.append(str(SYS_ROOT))

from horoscope_backend.core.settings import get_settings  # noqa: E402
from horoscope_backend.domain.auth import create_access_token  # noqa: E402


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Jeton JWT de développement")
    parser.add_argument("user_id", help="Identifiant utilisateur (claim `sub`)")
    parser.add_argument("--email", default=None)
    parser.add_argument("--minutes", type=int, default=None, help="Durée de validité")
    args = parser.parse_args(argv)

    settings = get_settings()
    payload = {"sub": args.user_id}
    if args.email:
        payload["email"] = args.email
    token = create_access_token(
        secret=settings.JWT_SECRET,
        alg=settings.JWT_ALG,
        expires_min=args.minutes or settings.JWT_EXPIRES_MIN,
        payload=payload,
    )
    print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
