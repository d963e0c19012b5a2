"""
ⒸAngelaMos | 2026
logging.py
"""
import logging
import sys

import orjson
import structlog
from rich.console import Console


console = Console()

# stdlib loggers that report every poll or change batch at INFO
QUIET_LOGGERS = ("watchfiles", "apscheduler")


def configure_logging(
    json_mode: bool | None = None,
    debug: bool = False,
) -> None:
    """
    Configure structlog for the watcher
    Auto-detects JSON mode based on TTY if not specified
    """
    if json_mode is None:
        json_mode = not sys.stderr.isatty()

    log_level = logging.DEBUG if debug else logging.INFO

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt = "iso",
                                         utc = True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_mode:
        processors = [
            *shared_processors,
            structlog.processors.JSONRenderer(serializer = _json_serializer),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors = True),
        ]

    structlog.configure(
        processors = processors,
        wrapper_class = structlog.make_filtering_bound_logger(log_level),
        context_class = dict,
        logger_factory = structlog.PrintLoggerFactory(),
        cache_logger_on_first_use = True,
    )

    logging.basicConfig(
        level = log_level,
        format = "%(levelname)s %(name)s %(message)s",
        stream = sys.stderr,
    )
    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(
            logging.DEBUG if debug else logging.WARNING
        )


def _json_serializer(obj: dict, **kwargs) -> str:
    return orjson.dumps(obj, default = str).decode("utf-8")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a bound logger instance
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(component = name)
    return logger
