#!/usr/bin/env python3
"""Startup script for the Recipe Service - container entry point"""

import logging
import sys
import uvicorn

from core.config import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def start_server():
    """Start the FastAPI server"""
    logger.info("Starting Recipe Service on %s:%s (%s)", settings.HOST, settings.PORT, settings.ENVIRONMENT)

    try:
        # Import the app here to catch any import errors
        from main import app
    except ImportError as e:
        logger.error("Failed to import app: %s", e)
        sys.exit(1)

    config = uvicorn.Config(
        app=app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
        use_colors=False,
        server_header=False,
        limit_concurrency=1000,
        timeout_keep_alive=5,
        loop="auto"
    )

    server = uvicorn.Server(config)
    server.run()


if __name__ == "__main__":
    start_server()
