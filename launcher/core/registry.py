from __future__ import annotations

from dataclasses import dataclass

from launcher.config import DEFAULT_FALLBACK_TARGET

UNKNOWN_VERSION = "unknown version"


@dataclass(frozen=True, slots=True)
class VersionEntry:
    id: str
    target: str
    description: str


def default_versions() -> list[VersionEntry]:
    """Stub versions every fresh registry knows about."""

    return [
        VersionEntry(id="1.8", target="minecraft_1.8.html", description="Minecraft 1.8 engine (stub)"),
        VersionEntry(id="1.12", target="minecraft_1.12.html", description="Minecraft 1.12 engine (stub)"),
    ]


class VersionRegistry:
    """In-memory version id -> (launch target, description) table.

    Targets and descriptions live in two maps sharing the same key, so either
    can be upserted without touching the other. Unknown ids are not errors:
    they resolve to the fallback target and the "unknown version" sentinel.
    """

    def __init__(self, *, fallback_target: str = DEFAULT_FALLBACK_TARGET, seed: bool = True) -> None:
        self.fallback_target = fallback_target
        self._targets: dict[str, str] = {}
        self._descriptions: dict[str, str] = {}
        if seed:
            for entry in default_versions():
                self.add(entry.id, entry.target, entry.description)

    def add(self, version_id: str, target: str, description: str | None = None) -> bool:
        self._targets[version_id] = target
        if description is not None:
            self._descriptions[version_id] = description
        return True

    def remove(self, version_id: str) -> bool:
        removed = self._targets.pop(version_id, None) is not None
        self._descriptions.pop(version_id, None)
        return removed

    def resolve_target(self, version_id: str) -> str:
        return self._targets.get(version_id, self.fallback_target)

    def describe(self, version_id: str) -> str:
        return self._descriptions.get(version_id, UNKNOWN_VERSION)

    def list_ids(self) -> set[str]:
        return set(self._targets)

    def get(self, version_id: str) -> VersionEntry | None:
        target = self._targets.get(version_id)
        if target is None:
            return None
        return VersionEntry(id=version_id, target=target, description=self.describe(version_id))
