from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from launcher.errors import InvalidHandlerError

# (version_id, target) -> result, or an awaitable resolving to one.
LaunchHook = Callable[[str, str], Any]


class ExtensionSlot:
    """Single-occupant registration point for a launch hook.

    Setting a new hook discards the previous one; there is no queueing.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._hook: LaunchHook | None = None

    def set(self, hook: LaunchHook) -> None:
        if not callable(hook):
            raise InvalidHandlerError(f"{self.name} must be callable")
        self._hook = hook

    def clear(self) -> None:
        self._hook = None

    def get(self) -> LaunchHook | None:
        return self._hook

    def __repr__(self) -> str:
        state = "empty" if self._hook is None else "set"
        return f"ExtensionSlot({self.name!r}, {state})"


async def call_hook(hook: LaunchHook, version_id: str, target: str) -> Any:
    """Invoke `hook` and settle its result.

    Immediate returns and awaitables are handled the same way: the coroutine
    resolves to the final value, or raises whatever the hook (or the awaitable
    it returned) raised.
    """

    result = hook(version_id, target)
    if inspect.isawaitable(result):
        return await result
    return result
