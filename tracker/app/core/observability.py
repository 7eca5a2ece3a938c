"""
Observability helpers.

Times store operations and emits structured log records.
"""

import time
import logging
from contextlib import contextmanager

from tracker.app.core.config import settings
from tracker.app.core.exceptions import ParcelNotFoundError

# Configure structured logger
logger = logging.getLogger(settings.logger_name)


@contextmanager
def track_operation(operation: str, **context):
    """
    Time the wrapped block and log its outcome.

    Context keyword arguments (e.g. number, client) are attached to the
    log record via ``extra``. Exceptions are logged and re-raised.
    """
    start_time = time.time()
    log_data = {"operation": operation, **context}

    try:
        yield log_data
    except Exception as exc:
        log_data["duration_ms"] = round((time.time() - start_time) * 1000, 2)
        log_data["error"] = type(exc).__name__

        # Log level based on failure kind
        if isinstance(exc, ParcelNotFoundError):
            logger.warning("Operation Error", extra=log_data)
        else:
            logger.error("Operation Failed", extra=log_data)
        raise

    log_data["duration_ms"] = round((time.time() - start_time) * 1000, 2)
    logger.info("Operation Completed", extra=log_data)
