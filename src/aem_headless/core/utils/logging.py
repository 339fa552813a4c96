"""Logging helpers (no env reads)."""
import logging
from urllib.parse import urlsplit, urlunsplit

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "aem_headless", level: int | None = None) -> logging.Logger:
    """Return ``name``'s logger with a single stderr handler attached."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def redact_url(url: str) -> str:
    """Mask ``user:password@`` credentials embedded in a URL before logging it."""
    try:
        parts = urlsplit(url)
        if parts.username is None and parts.password is None:
            return url
        host = parts.hostname or ""
        if parts.port is not None:
            host = f"{host}:{parts.port}"
    except ValueError:
        return url
    return urlunsplit(parts._replace(netloc=f"***@{host}"))
