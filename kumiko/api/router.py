"""Master API router. Mounts every endpoint router under /api."""

from __future__ import annotations

from fastapi import APIRouter

from kumiko.api import health, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(render.router)
