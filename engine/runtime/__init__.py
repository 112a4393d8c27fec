"""Engine runtime modules."""

from engine.runtime.console import StdioConsole
from engine.runtime.errors import RECOVERABLE_OUTPUT_ERRORS, log_recoverable
from engine.runtime.flow import RuntimeFlowMachine
from engine.runtime.logging import (
    JsonFormatter,
    configure_engine_logging,
    shutdown_engine_logging,
)

__all__ = [
    "JsonFormatter",
    "RECOVERABLE_OUTPUT_ERRORS",
    "RuntimeFlowMachine",
    "StdioConsole",
    "configure_engine_logging",
    "log_recoverable",
    "shutdown_engine_logging",
]
