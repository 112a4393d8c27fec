"""Application entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace

from battlecrab.game.app.session import run_session
from battlecrab.game.core.models import RepeatAttackPolicy
from battlecrab.game.infra.config import load_default_env_files, load_env_file, load_game_settings
from battlecrab.game.infra.logging import setup_logging
from engine.api.console import ConsoleClosedError, ConsolePort, create_stdio_console
from engine.api.logging import get_logger, shutdown_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battlecrab",
        description="Two-player Battleship played over the terminal.",
    )
    parser.add_argument("--env-file", help="Extra KEY=VALUE file loaded after the defaults.")
    parser.add_argument("--log-level", help="Log level override (DEBUG, INFO, ...).")
    parser.add_argument(
        "--repeat-attacks",
        choices=[policy.value for policy in RepeatAttackPolicy],
        help="Reject repeat attacks or count them as misses.",
    )
    parser.add_argument(
        "--no-log-file", action="store_true", help="Do not write a JSON run log."
    )
    return parser


def main(argv: Sequence[str] | None = None, *, console: ConsolePort | None = None) -> int:
    """Run one BattleCrab session and return the process exit code."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    if args.env_file:
        load_env_file(args.env_file)
    setup_logging(level_name=args.log_level, file_enabled=not args.no_log_file)
    settings = load_game_settings()
    if args.repeat_attacks:
        settings = replace(settings, repeat_attacks=RepeatAttackPolicy(args.repeat_attacks))
    logger.info("session_start repeat_attacks=%s", settings.repeat_attacks.value)
    try:
        state = run_session(
            console if console is not None else create_stdio_console(),
            repeat_policy=settings.repeat_attacks,
        )
        logger.info("session_end winner=%s", state.winner.name if state.winner else None)
        return EXIT_OK
    except ConsoleClosedError:
        logger.exception("session_aborted reason=console_closed")
        return EXIT_IO_FAILURE
    except KeyboardInterrupt:
        logger.info("session_aborted reason=interrupted")
        return EXIT_INTERRUPTED
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
