"""
Logging configuration.

WHAT: Installs one stream handler on the root logger with a format that
includes the current request ID.

HOW: Modules log through ``logging.getLogger(__name__)``; the filter below
reads the request ID from the request context ContextVar, so log lines
emitted by services and lookup clients carry it without any plumbing.
"""

import logging

from candidates.middleware.request_context import get_request_id


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


class RequestIdFilter(logging.Filter):
    """Attach the current request ID (or "-") to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


class RequestLogHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""

    def __init__(self):
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))
        self.addFilter(RequestIdFilter())


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging for the application.

    Safe to call more than once: a handler installed by an earlier call
    is replaced rather than duplicated.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        if isinstance(handler, RequestLogHandler):
            root.removeHandler(handler)

    root.addHandler(RequestLogHandler())
    root.setLevel(level.upper())
