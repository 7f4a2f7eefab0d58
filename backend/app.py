from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

# Third-party
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from api.errors import register_error_handlers
from api.schemas import MessageResponse
from api.users import router as users_router
from infrastructure.config import (
    get_app_version,
    get_cors_origins,
    get_host,
    get_log_level,
    get_mongodb_database,
    get_mongodb_url,
    get_port,
    get_user_repository_backend,
    load_environment,
)
from infrastructure.persistence.mongodb.connection import MongoConnection, connect_mongodb
from infrastructure.user.repository_factory import create_user_repository

load_environment()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
try:
    _logging.basicConfig(
        level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
except Exception:  # pragma: no cover
    _logging.basicConfig(level=_logging.INFO)

# structlog (MongoDB setup) renders into the stdlib handlers configured above
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.format_exc_info,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)

_startup_logger = _logging.getLogger("startup")
if _startup_logger.level == 0:  # not set explicitly
    _startup_logger.setLevel(getattr(_logging, _LOG_LEVEL, _logging.INFO))

APP_VERSION = get_app_version()

ROOT_MESSAGE = "Server Working !"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the single MongoDB connection, expose the repository, close on exit.

    Startup:
    - USER_REPOSITORY=mongodb: create the motor client and ping it. A missing
      URL or an unreachable server is logged and not fatal; requests then
      fail one by one with the generic 500.
    - USER_REPOSITORY=inmemory: no client at all.
    - The repository is stored on ``app.state`` for ``get_user_repository``.

    Shutdown: the motor client is closed.
    """
    logger = _logging.getLogger("startup")

    backend = get_user_repository_backend()
    logger.info("lifespan.startup", extra={"repository_backend": backend})

    connection: Optional[MongoConnection] = None
    if backend == "mongodb":
        connection = await connect_mongodb(get_mongodb_url(), get_mongodb_database())
        repository = create_user_repository(connection.database)
    else:
        repository = create_user_repository()

    app.state.user_repository = repository

    logger.info(
        "lifespan.ready",
        extra={
            "repository": type(repository).__name__,
            "mongodb_connected": bool(connection and connection.connected),
        },
    )
    try:
        yield
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        app.state.user_repository = None
        if connection is not None:
            connection.close()


app = FastAPI(
    title="User Service Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(users_router)


@app.get("/")
async def root() -> MessageResponse:
    return MessageResponse(message=ROOT_MESSAGE)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


__all__: list[str] = ["app", "lifespan"]


def main() -> Any:
    import uvicorn

    host = get_host()
    port = get_port()
    _startup_logger.info(f"Server is running on port: {port}")
    return uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
