from __future__ import annotations


class LauncherError(RuntimeError):
    pass


class InvalidHandlerError(LauncherError, TypeError):
    """A non-callable was offered to an extension slot or the event bus."""


class StageError(LauncherError):
    """A launch stage failed because its hook raised.

    `cause` is the hook's original exception; it is what failure events carry.
    """

    event: str = ""

    def __init__(self, *, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause


class PackLoadError(StageError):
    event = "pack_load_failed"


class LaunchNotifyError(StageError):
    event = "launcher_failed"


class NavigationUnavailableError(LauncherError):
    pass
