from __future__ import annotations

import logging
from typing import Protocol

from launcher.core.registry import VersionRegistry
from launcher.errors import NavigationUnavailableError

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    def set_href(self, url: str) -> None:  # pragma: no cover
        ...


class NavigationAdapter:
    """Synchronous redirect to a version's launch target.

    Not part of the launch pipeline: no hooks run and no events fire.
    """

    def __init__(self, registry: VersionRegistry, navigator: Navigator | None = None) -> None:
        self.registry = registry
        self.navigator = navigator

    def navigate(self, version_id: str) -> str:
        url = self.registry.resolve_target(version_id)
        if self.navigator is None:
            raise NavigationUnavailableError("no navigator available")
        logger.debug("navigating %s -> %s", version_id, url)
        self.navigator.set_href(url)
        return url


class RecordingNavigator:
    """Navigator that just remembers the last href (used for HTTP redirects)."""

    def __init__(self) -> None:
        self.href: str | None = None

    def set_href(self, url: str) -> None:
        self.href = url
