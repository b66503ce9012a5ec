#!/usr/bin/env python3
"""
MediaBrowse Application Starter
Initializes the Application (library, services) then starts the API server.
"""

import logging
import signal
import sys

import uvicorn

from mediabrowse.app import application
from mediabrowse.helpers.logging_helper import configure_logging

configure_logging(application.log_level)


def shutdown_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    logging.info(f"Received signal {signum}, shutting down...")
    application.stop()
    sys.exit(0)


if __name__ == "__main__":
    signal.signal(signal.SIGTERM, shutdown_handler)
    signal.signal(signal.SIGINT, shutdown_handler)

    logging.info("[Application] Starting MediaBrowse Application...")
    application.start()

    settings = application.get_service("config").get_browse_settings()
    logging.info(
        "Effective config: library=%s api=%s:%d random_max=%d recent_max=%d search_max=%d",
        application.library_path,
        application.api_host,
        application.api_port,
        settings.random_max,
        settings.recent_max,
        settings.search_max,
    )

    try:
        uvicorn.run(
            "mediabrowse.interfaces.api.api_app:api_app",
            host=application.api_host,
            port=application.api_port,
            log_level=application.log_level.lower(),
        )
    finally:
        logging.info("API server stopped, cleaning up...")
        application.stop()
