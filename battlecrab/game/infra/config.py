"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from battlecrab.game.core.models import RepeatAttackPolicy
from battlecrab.game.infra.app_data import resolve_project_root

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Game rule options resolved from environment."""

    repeat_attacks: RepeatAttackPolicy = RepeatAttackPolicy.REJECT


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files overwrite earlier values."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def load_game_settings() -> GameSettings:
    """Resolve game settings from ``BATTLECRAB_*`` environment variables."""
    raw = os.getenv("BATTLECRAB_REPEAT_ATTACKS", "").strip().lower()
    if not raw:
        return GameSettings()
    try:
        return GameSettings(repeat_attacks=RepeatAttackPolicy(raw))
    except ValueError:
        logger.warning(
            "unknown_repeat_attack_policy value=%s default=%s",
            raw,
            RepeatAttackPolicy.REJECT.value,
        )
        return GameSettings()


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    return resolve_project_root() / path
