"""
FastAPI application factory.

* Registers routes for road lookups and admin.
* Builds the geolocation provider once on startup via lifespan events.
* Maps lookup failures to ``{"error": ...}`` bodies.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from roadsnap.api.errors import register_error_handlers
from roadsnap.api.middleware import limiter
from roadsnap.api.routes import admin, roads
from roadsnap.config import settings
from roadsnap.infrastructure.google_maps import GoogleMapsProvider

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the provider client on startup so the API key is read once."""
    if getattr(app.state, "provider", None) is None:
        app.state.provider = GoogleMapsProvider.from_settings()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Nearest Road Distance API",
        description=(
            "Finds the road nearest to a latitude/longitude pair and "
            "returns the distance to it along with the road's name, type "
            "and snapped coordinates."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_error_handlers(app)

    # Routers
    app.include_router(roads.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
