"""Logging setup and per-request access log."""
import logging
import sys
import time

from fastapi import Request

logger = logging.getLogger("app.requests")

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure the root logger with a single stdout handler."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # passlib warns about the bcrypt version it cannot read
    logging.getLogger("passlib").setLevel(logging.ERROR)


async def log_requests(request: Request, call_next):
    """HTTP middleware: `METHOD path -> status (ms)`."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
