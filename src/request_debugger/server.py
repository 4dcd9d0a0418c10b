# server.py

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from request_debugger.common.logger import LoggerFactory, LogLevel
from request_debugger.config.settings import Settings, settings
from request_debugger.infra.di.container import (
    Container,
    configure_container,
    get_container,
    set_container,
)
from request_debugger.app.api.routers.debugger_router import router as debugger_router


def create_app(
    app_settings: Optional[Settings] = None, container: Optional[Container] = None
) -> FastAPI:
    """Build the FastAPI application serving the request debugger."""
    app_settings = app_settings or settings

    LoggerFactory.configure(
        level=LogLevel.DEBUG if app_settings.DEBUG else LogLevel.parse(app_settings.LOG_LEVEL),
        log_file=app_settings.LOG_FILE,
    )
    logger = LoggerFactory.get_logger(name="server")

    if container is not None:
        set_container(container)
    elif app_settings is not settings:
        set_container(configure_container(Container(), app_settings))
    container = get_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {app_settings.APP_NAME} v{app_settings.APP_VERSION}")
        if app_settings.debugger_enabled:
            container.debugger_service().start()
        else:
            logger.info("Request debugger is disabled (set ENABLE_API_DEBUGGER or DEBUG)")

        yield

        logger.info("Shutting down; saving drafts")
        if app_settings.debugger_enabled:
            container.tab_store().persist()

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Compose, save and execute ad-hoc HTTP requests against the backend",
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Disabled debugger: its routes simply do not exist (404)
    if app_settings.debugger_enabled:
        app.include_router(debugger_router)

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "version": app_settings.APP_VERSION,
            "debugger_enabled": app_settings.debugger_enabled,
        }

    return app


def main() -> None:
    """Run the debugger server with uvicorn."""
    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
