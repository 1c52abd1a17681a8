from __future__ import annotations

import asyncio
import logging
from typing import Any

from launcher.api.models import LaunchOutcome, LaunchStatus
from launcher.config import LauncherSettings
from launcher.core.engine import start_engine_stub
from launcher.core.events import ENGINE_STARTED, EventBus, EventHandler
from launcher.core.registry import VersionRegistry
from launcher.core.slots import ExtensionSlot, LaunchHook, call_hook
from launcher.errors import LaunchNotifyError, PackLoadError, StageError
from launcher.fsm import LaunchFSM

logger = logging.getLogger(__name__)


def _failure_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class LaunchOrchestrator:
    """Runs the staged launch sequence for a version.

    Owns the version registry, the event bus and the two extension slots
    (`pack_loader`, `launch_notifier`). `launch()` is the only pipeline entry
    point; it is reentrant and always returns exactly one outcome:

      resolve -> pack loader -> engine start -> notifier

    A failing hook short-circuits the remaining stages. The failure is turned
    into an error outcome (carrying the call's own url/version) and reported
    through a named event; it is never raised out of `launch()`.
    """

    def __init__(
        self,
        *,
        registry: VersionRegistry | None = None,
        events: EventBus | None = None,
        settings: LauncherSettings | None = None,
    ) -> None:
        cfg = settings or LauncherSettings()
        self.settings = cfg
        self.registry = registry or VersionRegistry(fallback_target=cfg.fallback_target, seed=cfg.seed_defaults)
        self.events = events or EventBus()
        self.pack_loader = ExtensionSlot("pack_loader")
        self.launch_notifier = ExtensionSlot("launch_notifier")

    # ---- registry ----

    def add_version(self, version_id: str, target: str, description: str | None = None) -> bool:
        return self.registry.add(version_id, target, description)

    def remove_version(self, version_id: str) -> bool:
        return self.registry.remove(version_id)

    def list_versions(self) -> list[str]:
        return sorted(self.registry.list_ids())

    def version_info(self, version_id: str) -> str:
        return self.registry.describe(version_id)

    def resolve_target(self, version_id: str) -> str:
        return self.registry.resolve_target(version_id)

    # ---- extension slots ----

    def set_pack_loader(self, hook: LaunchHook) -> None:
        self.pack_loader.set(hook)

    def clear_pack_loader(self) -> None:
        self.pack_loader.clear()

    def set_launch_notifier(self, hook: LaunchHook) -> None:
        self.launch_notifier.set(hook)

    def clear_launch_notifier(self) -> None:
        self.launch_notifier.clear()

    # ---- events ----

    def on_event(self, event: str, handler: EventHandler) -> None:
        self.events.on(event, handler)

    def off_event(self, event: str) -> None:
        self.events.off(event)

    # ---- pipeline ----

    async def launch(self, version_id: str) -> LaunchOutcome:
        fsm = LaunchFSM()

        # Captured once; later registry edits don't affect this call.
        target = self.registry.resolve_target(version_id)
        fsm.resolved()
        logger.debug("launch %s: resolved target %s", version_id, target)

        try:
            await self._run_hook(self.pack_loader, PackLoadError, version_id=version_id, target=target)
            fsm.pack_loaded()

            status, message = start_engine_stub(version_id)
            outcome = LaunchOutcome(status=status, message=message, url=target, version=version_id)
            fsm.engine_started()
            self.events.emit(ENGINE_STARTED, outcome)

            await self._run_hook(self.launch_notifier, LaunchNotifyError, version_id=version_id, target=target)
            fsm.notified()
        except StageError as e:
            fsm.fail()
            logger.warning("launch %s %s during %s: %s", version_id, fsm.phase.value, e.event, e.cause)
            self.events.emit(e.event, e.cause)
            return LaunchOutcome(
                status=LaunchStatus.error,
                message=_failure_message(e.cause),
                url=target,
                version=version_id,
            )

        logger.info("launch %s %s with status %s", version_id, fsm.phase.value, outcome.status.value)
        return outcome

    async def start_engine(self, version_id: str) -> LaunchOutcome:
        return await self.launch(version_id)

    async def _run_hook(
        self,
        slot: ExtensionSlot,
        error_cls: type[StageError],
        *,
        version_id: str,
        target: str,
    ) -> Any:
        hook = slot.get()
        if hook is None:
            return None

        logger.debug("launch %s: calling %s", version_id, slot.name)
        try:
            return await call_hook(hook, version_id, target)
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                # The launch itself is being cancelled (e.g. a caller timeout).
                raise
            # Only the hook's own awaitable was cancelled.
            raise error_cls(cause=e) from e
        except Exception as e:
            raise error_cls(cause=e) from e
