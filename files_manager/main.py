import logging
from contextlib import asynccontextmanager

import redis
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from files_manager.config import Settings
from files_manager.database import Base, create_db_engine, create_session_factory
from files_manager.exceptions import FilesManagerError, InternalError
from files_manager.models import FileRecord, User  # noqa: F401
from files_manager.routers import app as app_routes, auth, file, user
from files_manager.services.session_store import create_redis_client

logger = logging.getLogger(__name__)


def files_manager_error_handler(request: Request, exc: FilesManagerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})
    error = errors[0]
    location = error.get("loc", ())
    # loc is (source, field, ...); nested items name union members or list indexes
    field = location[0] if location else "request"
    if len(location) > 1 and isinstance(location[1], str):
        field = location[1]
    prefix = "Missing" if error.get("type") == "missing" else "Invalid"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": f"{prefix} {field}"})


def store_error_handler(request: Request, exc: Exception):
    logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected failure on %s %s", request.method, request.url.path, exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def create_app(settings: Settings = None, engine=None, redis_client=None) -> FastAPI:
    """Build the application around explicitly constructed store handles.

    Missing handles are created from ``settings``; tests pass their own.
    """
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = engine if engine is not None else create_db_engine(settings.database_url)
    redis_client = redis_client if redis_client is not None else create_redis_client(settings.redis_url)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        Base.metadata.create_all(bind=engine)
        yield
        engine.dispose()

    application = FastAPI(title="Files manager", lifespan=lifespan)
    application.state.settings = settings
    application.state.engine = engine
    application.state.session_factory = create_session_factory(engine)
    application.state.redis = redis_client

    application.add_exception_handler(FilesManagerError, files_manager_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(SQLAlchemyError, store_error_handler)
    application.add_exception_handler(redis.RedisError, store_error_handler)
    application.add_exception_handler(OSError, store_error_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)

    application.include_router(app_routes.router, tags=["App"])
    application.include_router(auth.router, tags=["Auth"])
    application.include_router(user.router, prefix="/users", tags=["User"])
    application.include_router(file.router, prefix="/files", tags=["Files"])

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
