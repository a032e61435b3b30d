#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the users and meals tables for the configured DATABASE_URL
"""

import logging
import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import Database

logger = logging.getLogger("dailydiet.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    database = Database(settings.database_url, echo=settings.db_echo)
    try:
        database.init_database()
    except Exception:
        logger.exception("Schema creation failed")
        return 1
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("DailyDiet Database Initialization (Standalone)")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Tables 'users' and 'meals' are ready.")
    else:
        print("FAILED! Check the errors above.")

    sys.exit(exit_code)
