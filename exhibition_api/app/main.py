"""
Main entrypoint for the Art Exhibition API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory services and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn exhibition_api.app.main:app --reload

All catalog state lives in the ``ExhibitionService`` attached to the
application, so restarting the process resets the catalog.
"""

import logging
import math
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.exhibition_service import ExhibitionService
from .services.user_service import UserService


def _json_safe(value: Any) -> Any:
    """Replace non‑finite floats (``inf``, ``nan``) with their text form."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return the usual 422 body, even when the rejected input is not valid JSON.

    Validation errors echo the offending input back to the client.
    JSON allows ``1e400``, ``Infinity`` and ``NaN`` to be decoded as
    floats but not to be encoded, so those inputs are sent back as text.
    """
    return JSONResponse(
        status_code=422,
        content={"detail": _json_safe(jsonable_encoder(exc.errors()))},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one‑time setup tasks such as configuring
    logging, creating the services and including versioned API
    routers.  Every call returns an application with its own services,
    so catalogs of separate applications are independent.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings

    # Initialise logging before creating services so seeding is logged.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, debug=app_settings.debug)
    app.state.settings = app_settings
    app.state.exhibition_service = ExhibitionService(seed=app_settings.seed_sample_data)
    app.state.user_service = UserService()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).info("%s %s ready", app_settings.project_name, app_settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
