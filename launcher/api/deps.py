from __future__ import annotations

from launcher.orchestrator import LaunchOrchestrator
from launcher.singleton import get_orchestrator


def get_launch_orchestrator() -> LaunchOrchestrator:
    return get_orchestrator()
