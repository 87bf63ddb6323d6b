# museummart/main.py
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .cart import cart_router
from .catalog import catalog_router
from .config import get_settings
from .logging import configure_logging, get_logger
from .seed import seed_store
from .storage import EntityStore, ReferentialIntegrityError


logger = get_logger(__name__)


def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    """Build the application around ``store``.

    Without an explicit store a fresh one is created and, unless
    disabled through the environment, seeded with the sample catalogue.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    if store is None:
        store = EntityStore()
        if settings.seed_sample_data:
            seed_store(store)

    app = FastAPI(
        title="MuseumMart",
        description=(
            "Catalogue browsing and shopping cart for museum-branded "
            "merchandise, served from an in-memory store."
        ),
        version=__version__,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ReferentialIntegrityError)
    async def referential_integrity_handler(request: Request, exc: ReferentialIntegrityError):
        logger.error("Integrity violation on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/")
    def health_check():
        return {"status": "ok", "message": "MuseumMart API is running"}

    app.include_router(catalog_router)
    app.include_router(cart_router)
    return app


app = create_app()
