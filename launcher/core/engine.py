from __future__ import annotations

from launcher.api.models import LaunchStatus

# version id -> message reported once its stub engine is up.
ENGINE_MESSAGES: dict[str, str] = {
    "1.8": "mc18 engine started (stub)",
    "1.12": "mc1.12 engine started (stub)",
}


def start_engine_stub(version_id: str) -> tuple[LaunchStatus, str]:
    """Start the built-in engine for `version_id`.

    Stand-in for real engine initialization: a table lookup that never raises.
    Versions without a stub engine report an error status instead.
    """

    message = ENGINE_MESSAGES.get(version_id)
    if message is None:
        return LaunchStatus.error, f"unknown version: {version_id}"
    return LaunchStatus.ok, message
