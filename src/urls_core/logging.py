"""Structured logging setup for URLs Core.

Records are JSON lines on stderr so ``extract --json`` output on stdout stays
parseable. While a scanner runs, the extractor binds ``format`` and
``scanner`` as context variables, so line skips and parse fallbacks logged
from inside a scan say which document type they came from.
"""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

_DEFAULT_LEVEL = "INFO"
_PACKAGE = "urls_core"


def configure_logging(level: str | None = None) -> None:
    """Route structlog through the stdlib root logger as JSON lines."""

    numeric_level = logging.getLevelNamesMapping().get((level or _DEFAULT_LEVEL).upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


@contextmanager
def scan_scope(file_format: str, scanner: str) -> Iterator[None]:
    """Tag every record logged inside the block with the running scan."""

    with bound_contextvars(format=file_format, scanner=scanner):
        yield


def _component_processor(
    logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Name the emitting subsystem: ``urls_core.scanner.engine`` becomes ``scanner``."""

    if "component" not in event_dict:
        parts = (getattr(logger, "name", None) or _PACKAGE).split(".")
        event_dict["component"] = parts[1] if parts[0] == _PACKAGE and len(parts) > 1 else parts[0]
    return event_dict


__all__ = ["configure_logging", "scan_scope"]
