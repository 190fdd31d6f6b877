"""
Nearest Road Distance Backend
=============================
Entry point. Run with: uvicorn main:app

Bind address and auto-reload come from settings (HOST, PORT, RELOAD).
"""

import uvicorn

from roadsnap.api.app import create_app
from roadsnap.config import settings

app = create_app()


def run() -> None:
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
