"""
Configuration for Pizzeria Builder

Settings are read from the environment, with a .env file loaded first if present:
- PIZZERIA_LOG_LEVEL: diagnostic logging level (default WARNING)
"""
import os
import logging
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(name: Optional[str] = None) -> int:
    """Map a level name to a logging level, falling back to WARNING"""
    if name is None:
        name = os.getenv("PIZZERIA_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    return LOG_LEVELS.get(name.strip().upper(), logging.WARNING)
