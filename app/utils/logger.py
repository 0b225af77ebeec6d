"""
Logging configuration.

Importing this module configures the root logger once for the whole service.
"""

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)

# SQL echo is controlled by the engine, keep the driver chatter down
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
