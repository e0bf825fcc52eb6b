from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visgoth.api.v1 import router as api_router
from visgoth.core.config import settings
from visgoth.core.logging_config import get_logger
from visgoth.services.profiling import NullVisgothRegistry, VisgothRegistry, get_visgoth, set_visgoth
from visgoth.services.profiling.broadcaster import start_profile_broadcaster, stop_profile_broadcaster

logger = get_logger("app")


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Startup
    if settings.VISGOTH_ENABLE_PROFILING:
        if not get_visgoth().is_enabled():
            set_visgoth(VisgothRegistry())
        logger.info(f"Profiling enabled for client {get_visgoth().client_id}")
        start_profile_broadcaster()
    else:
        set_visgoth(NullVisgothRegistry())
        logger.info("Profiling disabled")

    yield

    # Shutdown
    stop_profile_broadcaster()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Client-side performance profile aggregator",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
