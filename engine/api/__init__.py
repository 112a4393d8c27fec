"""Public engine API contracts."""

from engine.api.console import ConsoleClosedError, ConsolePort, create_stdio_console
from engine.api.flow import (
    FlowContext,
    FlowMachine,
    FlowTransition,
    InvalidTransitionError,
    create_flow_machine,
)
from engine.api.logging import EngineLoggingConfig, configure_logging, get_logger, shutdown_logging

__all__ = [
    "ConsoleClosedError",
    "ConsolePort",
    "EngineLoggingConfig",
    "FlowContext",
    "FlowMachine",
    "FlowTransition",
    "InvalidTransitionError",
    "configure_logging",
    "create_flow_machine",
    "create_stdio_console",
    "get_logger",
    "shutdown_logging",
]
