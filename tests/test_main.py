"""Tests for the uvicorn entry point."""

from unittest.mock import patch

from fastapi import FastAPI

import main
from roadsnap.config import settings


def test_module_exposes_app():
    assert isinstance(main.app, FastAPI)
    assert main.app.title == "Nearest Road Distance API"


def test_run_uses_settings():
    with (
        patch.object(settings, "host", "127.0.0.1"),
        patch.object(settings, "port", 9090),
        patch.object(settings, "reload", True),
        patch("main.uvicorn.run") as run,
    ):
        main.run()

    run.assert_called_once_with(
        "main:app",
        host="127.0.0.1",
        port=9090,
        reload=True,
        log_level=settings.log_level.lower(),
    )
