"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from battlecrab.game.infra.app_data import resolve_logs_dir
from engine.api.logging import EngineLoggingConfig, configure_logging
from engine.runtime.logging import JsonFormatter

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]

_TRUTHY = {"1", "true", "yes", "on"}


def build_logging_config(
    *, level_name: str | None = None, file_enabled: bool = True
) -> EngineLoggingConfig:
    """Build engine logging config from environment.

    Console logging is off unless ``BATTLECRAB_LOG_CONSOLE`` is set, because the
    terminal carries the game dialogue.
    """
    if level_name is None:
        level_name = os.getenv("BATTLECRAB_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO"))
    return EngineLoggingConfig(
        level_name=level_name.strip().upper(),
        console_format=os.getenv("LOG_FORMAT", "text").strip().lower(),
        file_path=_resolve_run_log_file_path() if file_enabled else None,
        file_format="json",
        console_enabled=os.getenv("BATTLECRAB_LOG_CONSOLE", "0").strip().lower() in _TRUTHY,
    )


def setup_logging(*, level_name: str | None = None, file_enabled: bool = True) -> None:
    """Configure application logging via engine logging API."""
    config = build_logging_config(level_name=level_name, file_enabled=file_enabled)
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"battlecrab_run_{stamp}.jsonl")
