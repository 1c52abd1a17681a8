from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_FALLBACK_TARGET = "index.html"


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _log_level_from_env() -> str:
    # Unknown names fall back to INFO so logging.basicConfig never sees them.
    level = os.environ.get("LAUNCHER_LOG_LEVEL", "").strip().upper()
    if level not in logging.getLevelNamesMapping():
        return "INFO"
    return level


@dataclass(frozen=True, slots=True)
class LauncherSettings:
    # Where unknown versions resolve to.
    fallback_target: str = DEFAULT_FALLBACK_TARGET
    # Register the built-in stub versions on startup.
    seed_defaults: bool = True
    log_level: str = "INFO"


def settings_from_env() -> LauncherSettings:
    return LauncherSettings(
        fallback_target=os.environ.get("LAUNCHER_FALLBACK_TARGET", DEFAULT_FALLBACK_TARGET),
        seed_defaults=_env_flag("LAUNCHER_SEED_DEFAULTS", default=True),
        log_level=_log_level_from_env(),
    )
