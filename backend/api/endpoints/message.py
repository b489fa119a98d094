"""Greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from backend.core.constants import GREETING_MESSAGE, MESSAGE_PATH

router = APIRouter()


# HEAD is answered like GET, with the body dropped by the server.
@router.api_route(MESSAGE_PATH, methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def message() -> str:
    """Return the fixed greeting. No parameters are read."""
    return GREETING_MESSAGE
