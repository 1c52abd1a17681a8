from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any, Literal

from launcher.errors import InvalidHandlerError

logger = logging.getLogger(__name__)

LaunchEventName = Literal[
    "pack_load_failed",
    "engine_started",
    "launcher_failed",
]

ENGINE_STARTED: LaunchEventName = "engine_started"

EventHandler = Callable[[str, Any], object]


class EventBus:
    """Event name -> single handler, with fire-and-forget dispatch.

    Contract:
      - `on(name, handler)` replaces any handler already registered for `name`.
      - `emit(name, payload)` calls `handler(name, payload)` and never raises;
        handler failures are logged and dropped.

    A handler returning an awaitable gets it scheduled on the running loop.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, EventHandler] = {}
        # Strong refs so scheduled handler tasks are not collected mid-flight.
        self._pending: set[asyncio.Future[Any]] = set()

    def on(self, event: str, handler: EventHandler) -> None:
        if not callable(handler):
            raise InvalidHandlerError("listener must be callable")
        self._handlers[event] = handler

    def off(self, event: str) -> None:
        self._handlers.pop(event, None)

    def emit(self, event: str, payload: Any) -> None:
        handler = self._handlers.get(event)
        if handler is None:
            return

        try:
            result = handler(event, payload)
        except Exception:
            logger.exception("event handler for %r failed", event)
            return

        if inspect.isawaitable(result):
            self._schedule(event, result)

    def _schedule(self, event: str, awaitable: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("dropping async handler result for %r: no running event loop", event)
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            return

        fut = asyncio.ensure_future(awaitable, loop=loop)
        self._pending.add(fut)

        def _done(f: asyncio.Future[Any]) -> None:
            self._pending.discard(f)
            if f.cancelled():
                return
            exc = f.exception()
            if exc is not None:
                logger.error("async event handler for %r failed", event, exc_info=exc)

        fut.add_done_callback(_done)
