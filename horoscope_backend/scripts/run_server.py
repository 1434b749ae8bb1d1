"""
Lance le serveur de développement (uvicorn) avec la configuration courante.
"""

import uvicorn

from horoscope_backend.core.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "horoscope_backend.app.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
