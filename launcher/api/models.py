from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class LaunchStatus(StrEnum):
    ok = "ok"
    error = "error"


class LaunchPhase(StrEnum):
    resolving = "resolving"
    pack_loading = "pack_loading"
    engine_starting = "engine_starting"
    notifying = "notifying"
    completed = "completed"
    failed = "failed"


class LaunchOutcome(BaseModel):
    """Terminal record of a single launch call."""

    model_config = ConfigDict(frozen=True)

    status: LaunchStatus
    message: str
    url: str
    version: str


class VersionUpsertRequest(BaseModel):
    target: str = Field(..., min_length=1)
    # Omitted -> keep whatever description is already registered.
    description: str | None = None


class VersionInfo(BaseModel):
    id: str
    target: str
    description: str
    registered: bool


class VersionListResponse(BaseModel):
    versions: list[VersionInfo]
