"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kumiko.config import settings
from kumiko.engine.errors import KumikoError
from kumiko.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.kumiko_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _kumiko_error_handler(request: Request, exc: KumikoError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Kumiko",
        description="Kumiko lattice engine: triangular grid tessellation rendered as SVG",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(KumikoError, _kumiko_error_handler)

    # @motif decorators fire on import
    import kumiko.engine.motifs  # noqa: F401

    from kumiko.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
