# querydao/core/config.py
"""Environment driven settings for the database helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from ``QUERYDAO_*`` environment variables."""

    database_url: str = "sqlite:///./querydao.db"
    database_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("QUERYDAO_DATABASE_URL", cls.database_url),
            database_echo=os.getenv("QUERYDAO_DATABASE_ECHO", "false").lower() == "true",
            log_level=os.getenv("QUERYDAO_LOG_LEVEL", cls.log_level).upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings, read once."""
    return Settings.from_env()


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the ``querydao`` logger.

    Importing the package never touches logging configuration; applications
    that want the library's warnings on stderr call this once at startup.
    """
    logger = logging.getLogger("querydao")
    logger.setLevel(getattr(logging, (level or get_settings().log_level).upper(), logging.INFO))
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
