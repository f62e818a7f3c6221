"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import channels, ws

api_router = APIRouter()

api_router.include_router(channels.router)
api_router.include_router(ws.router)
