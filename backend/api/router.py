"""API router aggregating all endpoint routers."""

from fastapi import APIRouter

from backend.api.endpoints import message

api_router = APIRouter()

api_router.include_router(message.router, tags=["message"])
