from __future__ import annotations

from launcher.core.registry import UNKNOWN_VERSION, VersionEntry, VersionRegistry


def test_defaults_are_seeded() -> None:
    reg = VersionRegistry()

    assert reg.list_ids() == {"1.8", "1.12"}
    assert reg.resolve_target("1.8") == "minecraft_1.8.html"
    assert reg.describe("1.12") == "Minecraft 1.12 engine (stub)"


def test_unknown_version_falls_back() -> None:
    reg = VersionRegistry(fallback_target="home.html")

    assert reg.resolve_target("nope") == "home.html"
    assert reg.describe("nope") == UNKNOWN_VERSION
    assert reg.get("nope") is None


def test_add_overwrites_last_write_wins() -> None:
    reg = VersionRegistry(seed=False)

    assert reg.add("1.8", "a.html") is True
    assert reg.resolve_target("1.8") == "a.html"

    assert reg.add("1.8", "b.html") is True
    assert reg.resolve_target("1.8") == "b.html"
    assert reg.list_ids() == {"1.8"}


def test_description_is_upserted_independently() -> None:
    reg = VersionRegistry(seed=False)

    reg.add("2.0", "two.html", "Two")
    # Updating only the target keeps the description.
    reg.add("2.0", "two-b.html")
    assert reg.describe("2.0") == "Two"

    reg.add("2.0", "two-b.html", "Two, again")
    assert reg.get("2.0") == VersionEntry(id="2.0", target="two-b.html", description="Two, again")


def test_add_without_description_reports_sentinel() -> None:
    reg = VersionRegistry(seed=False)
    reg.add("3.0", "three.html")

    assert reg.describe("3.0") == UNKNOWN_VERSION
    assert reg.get("3.0") is not None


def test_remove_returns_true_once() -> None:
    reg = VersionRegistry(seed=False)
    reg.add("1.8", "a.html", "desc")

    assert reg.remove("1.8") is True
    assert reg.remove("1.8") is False
    assert reg.remove("never-added") is False

    assert reg.resolve_target("1.8") == reg.fallback_target
    assert reg.describe("1.8") == UNKNOWN_VERSION


def test_list_ids_is_a_snapshot() -> None:
    reg = VersionRegistry(seed=False)
    reg.add("a", "a.html")

    ids = reg.list_ids()
    reg.add("b", "b.html")

    assert ids == {"a"}
