from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs (PyCharm/CLI).

    Lets LAUNCHER_* overrides apply to tests without exporting them in your shell.
    In CI we don't auto-load `.env`; opt in with LAUNCHER_LOAD_DOTENV_FOR_TESTS=1.
    """

    if os.environ.get("CI") and os.environ.get("LAUNCHER_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture()
def orchestrator():
    """Fresh orchestrator with the default stub versions and no hooks."""

    from launcher.config import LauncherSettings
    from launcher.orchestrator import LaunchOrchestrator

    return LaunchOrchestrator(settings=LauncherSettings())


@pytest.fixture()
def client() -> Generator:
    """FastAPI TestClient backed by a freshly initialized process-wide orchestrator."""

    from fastapi.testclient import TestClient

    from launcher.config import LauncherSettings
    from launcher.main import app
    from launcher.singleton import init_orchestrator, reset_orchestrator_for_tests

    reset_orchestrator_for_tests()
    init_orchestrator(settings=LauncherSettings())
    with TestClient(app) as c:
        yield c
    reset_orchestrator_for_tests()
