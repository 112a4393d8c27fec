"""Shared runtime exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Failures a best-effort output channel may raise (ValueError covers writes to closed streams).
RecoverableOutputErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_OUTPUT_ERRORS: RecoverableOutputErrors = (
    OSError,
    ValueError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
    **fields: object,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True, extra=fields or None)
