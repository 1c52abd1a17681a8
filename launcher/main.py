from fastapi import FastAPI
import logging

from launcher.api.routes import router
from launcher.config import settings_from_env
from launcher.singleton import init_orchestrator

settings = settings_from_env()

app = FastAPI(title="version-launcher", version="0.1.0")
app.include_router(router)
# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def _startup() -> None:
    orch = init_orchestrator(settings=settings)
    logger.info("launcher ready with versions: %s", ", ".join(orch.list_versions()) or "(none)")


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "version-launcher", "version": "0.1.0"}
