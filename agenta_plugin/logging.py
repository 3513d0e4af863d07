"""Structured logging for the Agenta node service.

structlog events and stdlib records share one processor chain, so
``logging.getLogger`` callers (uvicorn, requests) render the same way as
``structlog.get_logger`` callers.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.stdlib import ProcessorFormatter

# urllib3 logs every connection at DEBUG
_NOISY_LOGGERS = ("urllib3", "urllib3.connectionpool")

def _remove_internal_fields(
    logger: Optional[logging.Logger],
    method_name: str,
    event_dict: Dict[str, Any],
) -> Dict[str, Any]:
    event_dict.pop("_record", None)
    event_dict.pop("_from_structlog", None)
    return event_dict

def configure_logging(*, json_output: bool = False, level: str = "INFO") -> None:
    """Configure structlog and stdlib logging.

    Args:
        json_output: Render JSON lines instead of the console format.
        level: Root log level name.
    """
    log_level = getattr(logging, level.upper())

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        final_processors: List[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=[*shared_processors, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # reconfigurable from tests
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=shared_processors,
        )
    )

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)

    noisy_level = max(log_level, logging.WARNING)
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)

def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
