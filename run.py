"""Launcher for the Event Finder API.

Host, port and log level come from the same environment variables as
the application settings (``HOST``, ``PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from event_finder_api.app.core.config import Settings, settings


APP_PATH = "event_finder_api.app.main:app"


def build_config(app_settings: Settings = settings) -> Config:
    """Return the uvicorn configuration for the API server."""
    return Config(
        app=APP_PATH,
        host=app_settings.host,
        port=app_settings.port,
        reload=False,
        log_level=app_settings.log_level.lower(),
    )


async def main() -> None:
    """Serve the API until interrupted."""
    server = Server(build_config())
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
