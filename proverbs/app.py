import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from proverbs.core.config import Settings, get_settings
from proverbs.repositories.json_storage import ProverbStore, StoreError
from proverbs.routers import proverbs as proverbs_router
from proverbs.services.proverb_service import ProverbService

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "..", "web")
TEMPLATES = os.path.join(BASE, "..", "templates")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data:; "
            "style-src 'self'; "
            "script-src 'self' 'unsafe-inline'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.seed_on_startup:
        try:
            app.state.proverb_store.initialize()
        except StoreError:
            logger.exception("Could not initialize %s", settings.proverbs_file)
    logger.info("Serving proverbs from %s", settings.proverbs_file)
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit Settings (defaults to the environment)."""
    settings = settings or get_settings()
    app = FastAPI(title="Proverbs", lifespan=lifespan)
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.mount("/static", StaticFiles(directory=WEB), name="static")

    store = ProverbStore(settings.proverbs_file)
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.state.proverb_store = store
    app.state.proverb_service = ProverbService(store)

    app.include_router(proverbs_router.router)
    return app


app = create_app()
