"""
Numbers endpoints.

These routes expose the session‑scoped number collection: list it,
append a random number, clear it and read its sum.  All four return
the same ``NumberResponse`` shape.  Failures are logged and reported
as HTTP 500 with a fixed plain text message; exception details never
reach the client.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from numbers_api.app.core.config import settings
from numbers_api.app.core.session import SessionStore, get_session_store
from numbers_api.app.schemas.number import NumberResponse
from numbers_api.app.services.number_service import NumberService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_number_service(
    request: Request,
    session: Optional[SessionStore] = Depends(get_session_store),
) -> NumberService:
    """Build a ``NumberService`` bound to the current request's session.

    The value range comes from the settings the application was created
    with, falling back to the environment settings.
    """
    app_settings = getattr(request.app.state, "settings", settings)
    return NumberService(session, value_range=app_settings.value_range)


def _server_error(message: str) -> PlainTextResponse:
    """Plain text 500 carrying a fixed message; details only go to the log."""
    return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("", response_model=NumberResponse, summary="List numbers")
@router.get("/", response_model=NumberResponse, include_in_schema=False)
async def get_numbers(
    service: NumberService = Depends(get_number_service),
) -> Union[NumberResponse, PlainTextResponse]:
    """Return the numbers stored in the current session."""
    try:
        return await service.list_numbers()
    except Exception:
        logger.exception("Error retrieving numbers")
        return _server_error("An error occurred while retrieving numbers")


@router.post("/add", response_model=NumberResponse, summary="Add a random number")
async def add_number(
    service: NumberService = Depends(get_number_service),
) -> Union[NumberResponse, PlainTextResponse]:
    """Append a random number to the session and return the updated list."""
    try:
        return await service.add_random_number()
    except Exception:
        logger.exception("Error adding number")
        return _server_error("An error occurred while adding number")


@router.post("/clear", response_model=NumberResponse, summary="Clear numbers")
async def clear_numbers(
    service: NumberService = Depends(get_number_service),
) -> Union[NumberResponse, PlainTextResponse]:
    """Remove every number from the session."""
    try:
        return await service.clear_numbers()
    except Exception:
        logger.exception("Error clearing numbers")
        return _server_error("An error occurred while clearing numbers")


@router.get("/sum", response_model=NumberResponse, summary="Sum numbers")
async def get_sum(
    service: NumberService = Depends(get_number_service),
) -> Union[NumberResponse, PlainTextResponse]:
    """Return the numbers in the session together with their sum."""
    try:
        return await service.get_sum()
    except Exception:
        logger.exception("Error calculating sum")
        return _server_error("An error occurred while calculating sum")
