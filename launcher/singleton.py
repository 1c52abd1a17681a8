from __future__ import annotations

from launcher.config import LauncherSettings
from launcher.orchestrator import LaunchOrchestrator


_ORCHESTRATOR: LaunchOrchestrator | None = None


def init_orchestrator(*, settings: LauncherSettings) -> LaunchOrchestrator:
    """Create the shared orchestrator on first use.

    Later calls ignore `settings` and hand back the orchestrator built first,
    so the startup hook and test fixtures can both call this.
    """

    global _ORCHESTRATOR
    if _ORCHESTRATOR is None:
        _ORCHESTRATOR = LaunchOrchestrator(settings=settings)
    return _ORCHESTRATOR


def reset_orchestrator_for_tests() -> None:
    """Drop the cached orchestrator so tests can start from a fresh registry."""

    global _ORCHESTRATOR
    _ORCHESTRATOR = None


def get_orchestrator() -> LaunchOrchestrator:
    if _ORCHESTRATOR is None:
        raise RuntimeError("Orchestrator not initialized. Call init_orchestrator() at startup.")
    return _ORCHESTRATOR
