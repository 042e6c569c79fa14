from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
from .config import Settings, get_settings
from .database import Database
from .errors import error_body, register_error_handlers
from .routes import dashboard, products, profiles
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.debug("Starting up the application")
    settings: Settings = app.state.settings
    db = Database(settings.database_url, echo=settings.sql_echo)
    try:
        # Test database connection first
        db.check_connection()
        db.init_db()
    except SQLAlchemyError as e:
        logger.error(f"Database error during startup: {str(e)}")
        db.close()
        raise

    app.state.db = db
    logger.info("Inventory API ready")
    yield
    logger.debug("Shutting down the application")
    db.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Inventory Admin API",
        description="Products, customer profiles and dashboard totals",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > settings.max_body_bytes:
            logger.warning(f"Rejected {request.url.path}: body of {length} bytes")
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content=error_body("Request body too large."),
            )
        return await call_next(request)

    register_error_handlers(app)

    app.include_router(products.router, tags=["Products"])
    app.include_router(profiles.router, tags=["Profiles"])
    app.include_router(dashboard.router, tags=["Dashboard"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Inventory Admin API"}

    return app
