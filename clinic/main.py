import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables as early as possible
load_dotenv()

from .config import settings
from .database import Database
from .exceptions import ClinicError, clinic_exception_handler, http_exception_handler, request_validation_handler
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware
from .routers import appointments_router, auth_router, doctors_router, patients_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    database = database or Database(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME}...")
        database.open()
        yield
        database.close()
        logger.info(f"Shutting down {settings.APP_NAME}...")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
    )
    app.state.database = database

    app.add_exception_handler(ClinicError, clinic_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.include_router(auth_router.router)
    app.include_router(doctors_router.router)
    app.include_router(patients_router.router)
    app.include_router(appointments_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": settings.APP_VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "clinic.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
