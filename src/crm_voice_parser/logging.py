"""
Structured logging for the CRM voice note parser.

structlog is configured once on import from the dotenv settings and again by
the API lifespan. Request fields (trace_id, user_id) are held in structlog's
own contextvars, so every event logged while a voice note is parsed carries
the id of the request that submitted it.
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Generator
from uuid import uuid4

import structlog
from structlog.types import Processor

from .config import config


def new_trace_id() -> str:
    """Fresh id for a request that arrived without one."""
    return uuid4().hex


def configure_logging(
    json_output: bool | None = None,
    log_level: str | None = None,
) -> None:
    """
    Configure structlog for the parser and the HTTP service.

    Args:
        json_output: JSON lines when True, console output when False
                     (defaults to config.LOG_JSON)
        log_level: Minimum level name (defaults to config.LOG_LEVEL)
    """
    if json_output is None:
        json_output = config.LOG_JSON
    level_num = getattr(logging, (log_level or config.LOG_LEVEL).upper(), logging.INFO)

    logging.basicConfig(format='%(message)s', stream=sys.stdout, level=level_num)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
    ]
    if json_output:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def logging_context(
    trace_id: str | None = None,
    user_id: str | None = None,
) -> Generator[None, None, None]:
    """
    Bind request fields to every event logged inside the block.

    Fields left as None are not bound. On exit the previous values (if any)
    are restored, also when the block raises.

    Usage:
        with logging_context(trace_id=new_trace_id(), user_id=str(note.user_id)):
            outcome = voice_note_parser.parse(note.transcript)
    """
    fields = {
        key: value
        for key, value in (('trace_id', trace_id), ('user_id', user_id))
        if value is not None
    }
    with structlog.contextvars.bound_contextvars(**fields):
        yield


class PipelineTimer:
    """Wall-clock durations of the parse stages, in milliseconds."""

    def __init__(self):
        self.started = time.perf_counter()
        self.stage_ms: dict[str, float] = {}

    @contextmanager
    def stage(self, name: str) -> Generator[None, None, None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.stage_ms[name] = (time.perf_counter() - start) * 1000

    def summary(self) -> dict[str, Any]:
        """Fields for the parse completion event."""
        return {
            'total_ms': round((time.perf_counter() - self.started) * 1000, 2),
            'stage_ms': {name: round(ms, 2) for name, ms in self.stage_ms.items()},
        }


configure_logging()
