import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FILE = os.path.join(os.path.dirname(__file__), "..", "logs.txt")


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: str | None
    allowed_origins: list[str]
    host: str
    port: int


def _log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in LOG_LEVELS else "INFO"


@lru_cache
def get_settings() -> Settings:
    origins = os.getenv("DCF_ALLOWED_ORIGINS", "http://localhost:5173")
    return Settings(
        log_level=_log_level(os.getenv("DCF_LOG_LEVEL", "INFO")),
        # An explicitly empty DCF_LOG_FILE turns the file handler off
        log_file=os.getenv("DCF_LOG_FILE", DEFAULT_LOG_FILE) or None,
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
        host=os.getenv("DCF_HOST", "0.0.0.0"),
        port=int(os.getenv("DCF_PORT", "8080")),
    )


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Console logging on stderr, plus a file handler when log_file is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        handlers=handlers,
    )
