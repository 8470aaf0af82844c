"""
FastAPI Application Factory

Assembles the API:
- Routes (commands, animations, sessions)
- Middleware (CORS, error handlers)
- Service container for dependency injection

The factory pattern keeps tests simple: create an app with a fresh
ServiceContainer per test.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional

from api.routes import commands, animations, sessions
from api.middleware.error_handler import register_exception_handlers
from api.dependencies import set_service_container
from services.service_container import ServiceContainer
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",      # Next.js dev server
    "http://localhost:5173",      # Vite dev server
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def create_app(
    services: Optional[ServiceContainer] = None,
    title: str = "Sorting Visualizer API",
    description: str = "Chat command interpreter and bubble sort step sequencer",
    version: str = "1.0.0",
    docs_enabled: bool = True,
    cors_origins: Optional[list[str]] = None
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        services: Service container (default: built from default AppConfig)
        title: API title (shown in docs)
        description: API description
        version: API version
        docs_enabled: Enable /docs and /redoc
        cors_origins: CORS allowed origins (default: local dev servers)

    Returns:
        Configured FastAPI application ready to run
    """
    services = services or ServiceContainer.build()
    set_service_container(services)

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None
    )

    log.info(f"Creating FastAPI app: {title} v{version}")

    # =========================================================================
    # CORS Configuration
    # =========================================================================

    if cors_origins is None:
        cors_origins = DEFAULT_CORS_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    log.debug(f"CORS enabled for origins: {cors_origins}")

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # Routes
    # =========================================================================

    app.include_router(commands.router, prefix="/api/v1")
    app.include_router(animations.router, prefix="/api/v1")
    app.include_router(sessions.router, prefix="/api/v1")

    log.debug("Routes registered: commands, animations, sessions (/api/v1)")

    @app.get(
        "/api/health",
        tags=["System"],
        summary="Health check",
        description="Check if API is running and responding"
    )
    async def health_check():
        return {
            "status": "healthy",
            "service": "sorting-visualizer-api",
            "version": version,
            "sessions": len(services.sessions)
        }

    @app.get("/", include_in_schema=False)
    async def root():
        return JSONResponse(
            {
                "message": "Sorting Visualizer API",
                "docs": "/docs",
                "health": "/api/health"
            }
        )

    log.info(f"FastAPI app created successfully: {title}")

    return app
