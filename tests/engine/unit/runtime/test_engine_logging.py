from __future__ import annotations

import json
import logging

from engine.api.logging import EngineLoggingConfig
from engine.runtime.logging import (
    JsonFormatter,
    configure_engine_logging,
    shutdown_engine_logging,
)


def _restore(root: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    shutdown_engine_logging()
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    logger = logging.getLogger("test.engine.json")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="attack %s",
        args=("hit",),
        exc_info=None,
        extra={"turn": 3},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "attack hit"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"turn": 3}


def test_disabled_console_without_file_installs_null_handler() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        configure_engine_logging(EngineLoggingConfig(console_enabled=False, file_path=None))
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.NullHandler)
    finally:
        _restore(root, original_handlers, original_level)


def test_file_logging_is_flushed_on_shutdown(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_engine_logging(
            EngineLoggingConfig(
                level_name="INFO",
                console_enabled=False,
                file_path=str(log_file),
                file_format="json",
            )
        )
        logging.getLogger("test.engine.file").info("ship_placed", extra={"player": "Alice"})
        shutdown_engine_logging()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert lines
        record = json.loads(lines[-1])
        assert record["msg"] == "ship_placed"
        assert record["fields"]["player"] == "Alice"
    finally:
        _restore(root, original_handlers, original_level)
