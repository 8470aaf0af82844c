"""
main_asyncio.py - Application entry point for the sorting visualizer API
-------------------------------------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- wiring the service container
- serving the FastAPI app with uvicorn until Ctrl+C
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (log symbols)
# ---------------------------------------------------------------------------

if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio
import uvicorn
from fastapi import FastAPI

from api.main import create_app
from managers import ConfigManager
from models.config import AppConfig
from models.enums import LogCategory
from services.service_container import ServiceContainer
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


async def run_api_server(app: FastAPI, host: str, port: int) -> None:
    """Run uvicorn inside the current event loop."""
    config = uvicorn.Config(
        app=app,
        host=host,
        port=port,
        loop="asyncio",
        log_level="info",
        access_log=False,
    )
    server = uvicorn.Server(config)

    try:
        log.info(f"Starting API server on {host}:{port}")
        await server.serve()
    except asyncio.CancelledError:
        log.debug("API server cancelled")
        raise


def build_app(config: AppConfig) -> FastAPI:
    services = ServiceContainer.build(config)
    return create_app(
        services=services,
        docs_enabled=config.api.docs_enabled,
        cors_origins=config.api.cors_origins,
    )


async def main():
    log.info("Loading configuration...")
    config = ConfigManager().load()
    configure_logger(config.logging.level, config.logging.use_colors)

    app = build_app(config)
    await run_api_server(app, config.api.host, config.api.port)
    log.info("Sorting visualizer shut down cleanly.")


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run()
