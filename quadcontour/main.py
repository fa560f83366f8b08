"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quadcontour import __version__
from quadcontour.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.quadcontour_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="quadcontour",
        description="Adaptive quadtree contouring of implicit 2D functions",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all field modules to trigger registration
    from quadcontour.engine.fields import register_builtin_fields

    register_builtin_fields()

    from quadcontour.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
