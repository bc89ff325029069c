#!/usr/bin/env python3
"""
CareerGuide FastAPI Startup Script
Main entry point for the CareerGuide API application
"""
import logging

import uvicorn

from careerguide.core.config import get_settings
from careerguide.core.logging_config import configure_logging

logger = logging.getLogger("careerguide.startup")

def start_server():
    """Start the FastAPI server (Firebase is initialized by the app's startup hook)"""
    settings = get_settings()
    configure_logging(settings)
    try:
        logger.info("Starting %s server (storage backend: %s)", settings.PROJECT_NAME, settings.STORAGE_BACKEND)
        logger.info("API Documentation: http://localhost:8000/docs")
        logger.info("Health Check: http://localhost:8000/health")

        uvicorn.run(
            "careerguide.main:app",
            host="0.0.0.0",
            port=8000,
            reload=settings.DEBUG,
            log_level=settings.LOG_LEVEL.lower()
        )
    except Exception:
        logger.exception("Failed to start server")
        raise

if __name__ == "__main__":
    start_server()
