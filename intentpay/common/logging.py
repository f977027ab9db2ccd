"""Structured JSON logging with per-request correlation fields.

Entrypoints open a `request_context` around each request so log lines
carry its trace and request ids; the context is reset afterwards, since a
warm serverless container reuses the same thread and loop across requests.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from intentpay.common.config import settings


trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(service)s %(trace_id)s %(request_id)s %(message)s"
RENAMED_FIELDS = {"asctime": "timestamp", "levelname": "level", "name": "logger"}


class RequestContextFilter(logging.Filter):
    """Stamp the service name and the current request ids onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = settings.service_name
        record.trace_id = trace_id_ctx.get()
        record.request_id = request_id_ctx.get()
        return True


@contextmanager
def request_context(trace_id: str = "", request_id: str = "") -> Iterator[None]:
    """Bind correlation ids for the duration of one request."""

    trace_token = trace_id_ctx.set(trace_id)
    request_token = request_id_ctx.set(request_id)
    try:
        yield
    finally:
        request_id_ctx.reset(request_token)
        trace_id_ctx.reset(trace_token)


def configure_logging() -> None:
    """Route all records through one stdout JSON handler."""

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(JsonFormatter(LOG_FORMAT, rename_fields=RENAMED_FIELDS))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level.upper())
    # Stripe logs request lines at INFO; keep them out unless debugging.
    logging.getLogger("stripe").setLevel(max(root.level, logging.WARNING))


logger = logging.getLogger("intentpay")
