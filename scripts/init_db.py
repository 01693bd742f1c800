#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the meals table on the configured DATABASE_URL without starting the API.
"""

import logging
import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from sqlalchemy.engine import make_url

from app.config import settings
from domain.models import init_database

logger = logging.getLogger("dailydiet.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    logger.info(
        "Initializing schema on %s",
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    try:
        init_database()
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
