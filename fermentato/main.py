"""FastAPI application entry point."""
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fermentato.config import settings
from fermentato.database import init_db, purge_expired_sessions
from fermentato.logging_config import setup_logging, get_logger
from fermentato.services.seed_admin import seed_admin_user
from fermentato.middleware.error_handler import setup_exception_handlers
from fermentato.middleware.logging_middleware import LoggingMiddleware
from fermentato.routes import (
    health,
    auth,
    users,
    pubs,
    taplist,
    bottles,
    menu,
    breweries,
    beers,
    search,
    favorites,
    tastings,
    reviews,
    admin,
)


logger = get_logger("fermentato.main")


def _run_startup() -> None:
    """Run DB init, session cleanup and admin seed in background."""
    try:
        init_db()
        logger.info("Database initialized")
        removed = purge_expired_sessions()
        if removed:
            logger.info("Purged %d expired sessions", removed)
        try:
            if seed_admin_user():
                logger.info("Admin user seeded")
        except Exception as e:
            logger.warning("Admin seed failed (non-fatal): %s", e)
    except Exception as e:
        logger.exception("Startup failed: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    # Uvicorn does not accept connections until lifespan yields.
    thread = threading.Thread(target=_run_startup, daemon=True)
    thread.start()
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)
app.add_middleware(LoggingMiddleware)
origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (
    health,
    auth,
    users,
    pubs,
    taplist,
    bottles,
    menu,
    breweries,
    beers,
    search,
    favorites,
    tastings,
    reviews,
    admin,
):
    app.include_router(module.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Fermenta.to API", "docs": "/docs"}
