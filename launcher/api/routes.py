from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse

from launcher.api.deps import get_launch_orchestrator
from launcher.api.models import LaunchOutcome, VersionInfo, VersionListResponse, VersionUpsertRequest
from launcher.navigation import NavigationAdapter, RecordingNavigator
from launcher.orchestrator import LaunchOrchestrator

router = APIRouter()


def _version_info(orch: LaunchOrchestrator, version_id: str) -> VersionInfo:
    entry = orch.registry.get(version_id)
    if entry is None:
        return VersionInfo(
            id=version_id,
            target=orch.resolve_target(version_id),
            description=orch.version_info(version_id),
            registered=False,
        )
    return VersionInfo(id=entry.id, target=entry.target, description=entry.description, registered=True)


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/versions", response_model=VersionListResponse)
async def list_versions_route(orch: LaunchOrchestrator = Depends(get_launch_orchestrator)) -> VersionListResponse:
    return VersionListResponse(versions=[_version_info(orch, vid) for vid in orch.list_versions()])


@router.get("/versions/{version_id}", response_model=VersionInfo)
async def get_version_route(
    version_id: str,
    orch: LaunchOrchestrator = Depends(get_launch_orchestrator),
) -> VersionInfo:
    # Unknown versions aren't a 404: they report the fallback target.
    return _version_info(orch, version_id)


@router.put("/versions/{version_id}", response_model=VersionInfo)
async def upsert_version_route(
    version_id: str,
    payload: VersionUpsertRequest,
    orch: LaunchOrchestrator = Depends(get_launch_orchestrator),
) -> VersionInfo:
    orch.add_version(version_id, payload.target, payload.description)
    return _version_info(orch, version_id)


@router.delete("/versions/{version_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_version_route(
    version_id: str,
    orch: LaunchOrchestrator = Depends(get_launch_orchestrator),
) -> Response:
    if not orch.remove_version(version_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Version not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/versions/{version_id}/launch", response_model=LaunchOutcome)
async def launch_route(
    version_id: str,
    orch: LaunchOrchestrator = Depends(get_launch_orchestrator),
) -> LaunchOutcome:
    return await orch.launch(version_id)


@router.get("/versions/{version_id}/navigate")
async def navigate_route(
    version_id: str,
    orch: LaunchOrchestrator = Depends(get_launch_orchestrator),
) -> RedirectResponse:
    navigator = RecordingNavigator()
    url = NavigationAdapter(orch.registry, navigator).navigate(version_id)
    return RedirectResponse(url=url)
