"""
Main entrypoint for the Numbers API.

This module assembles the FastAPI application: it sets up logging,
installs the session and CORS middleware and includes the API router
under ``/api``.  The ``create_app`` function builds and configures the
app, which is then instantiated at module import time as ``app`` so it
can be served directly, e.g.::

    uvicorn numbers_api.app.main:app --reload
"""

from typing import Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.session import SessionBackend
from .api.router import router as api_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app from.  Defaults to the module level
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    # Interactive docs are only served in debug mode.
    docs_kwargs = {} if settings.debug else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(title=settings.project_name, version=settings.api_version, **docs_kwargs)
    app.state.settings = settings
    # Session data stays on the server; the cookie only carries the
    # session id.  Both expire after the same idle period.
    app.state.session_backend = SessionBackend(settings.session_max_age)

    # Starlette re‑signs the cookie on every response that carries
    # session data, so ``max_age`` acts as an idle timeout.
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.session_https_only,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health", include_in_schema=False)
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
