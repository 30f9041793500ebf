# bookstore/config.py
import os
import logging

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///bookstore.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
ECHO_SQL = os.getenv("BOOKSTORE_ECHO_SQL", "").lower() in ("1", "true", "yes")
CONFLICT_RETRIES = int(os.getenv("BOOKSTORE_CONFLICT_RETRIES", "3"))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the API and CLI entry points"""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
